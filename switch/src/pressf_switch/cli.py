from __future__ import annotations

import argparse
import asyncio
import json
from collections.abc import Sequence

from pressf_switch.application.evaluate_deadline import evaluate
from pressf_switch.application.resolve_config import resolve
from pressf_switch.application.status import status_snapshot
from pressf_switch.domain.settings import SettingsOverride, validate_protocol_length
from pressf_switch.domain.status import SwitchStatus
from pressf_switch.domain.streak import StreakProgress
from pressf_switch.infrastructure.observability.logging import init_logging
from pressf_switch.runtime.bootstrap import RuntimeContext, create_runtime_context


def format_status(status: SwitchStatus) -> str:
    if status.is_dead:
        return "dead: the switch has fired, check in to reset it"
    if status.is_24h_mode:
        unit = "hour" if status.hours_remaining == 1 else "hours"
        return f"alive: {status.hours_remaining} {unit} remaining"
    unit = "day" if status.days_remaining == 1 else "days"
    return f"alive: {status.days_remaining} {unit} remaining"


def format_streak(streak: StreakProgress) -> str:
    unit = "day" if streak.current == 1 else "days"
    line = f"streak: {streak.current} {unit} (longest {streak.longest})"
    if streak.used_free_skip:
        line += ", free skip used"
    if streak.bonus:
        line += f", milestone bonus +{streak.bonus}"
    return line


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pressf-switch", description="Inspect and feed the dead man's switch.")
    commands = parser.add_subparsers(dest="command", required=True)

    status = commands.add_parser("status", help="Evaluate the switch once.")
    status.add_argument("--days", type=int, help="Preview a protocol length without saving it.")
    status.add_argument("--json", action="store_true", help="Print a JSON snapshot.")

    commands.add_parser("check-in", help="Reset the countdown to now.")

    set_length = commands.add_parser("set-length", help="Change the protocol length (also checks in).")
    set_length.add_argument("days", type=int)

    interval = commands.add_parser("reminder-interval", help="Minutes between reminders once dead.")
    interval.add_argument("minutes", type=int)

    commands.add_parser("watch", help="Print every status publication until interrupted.")

    remind = commands.add_parser("remind", help="Send check-in reminders while dead.")
    remind.add_argument("--once", action="store_true", help="Run a single reminder pass and exit.")
    return parser


async def _status(ctx: RuntimeContext, *, days: int | None, as_json: bool) -> None:
    override = None
    if days is not None:
        override = SettingsOverride(protocol_length_days=validate_protocol_length(days))
    now = ctx.clock()
    config = resolve(ctx.store.get_settings(), override, now=now)
    status = evaluate(config, now)
    if as_json:
        print(json.dumps(status_snapshot(status, config, now=now)))
    else:
        print(format_status(status))


async def _watch(ctx: RuntimeContext) -> None:
    controller = ctx.create_controller(observers=(lambda status: print(format_status(status), flush=True),))
    async with controller:
        await asyncio.Event().wait()


async def _remind(ctx: RuntimeContext, *, once: bool) -> None:
    if once:
        outcome = ctx.reminder_service.run_once()
        print(outcome.reason)
        return
    worker = ctx.create_reminder_worker()
    worker.start()
    try:
        await asyncio.Event().wait()
    finally:
        worker.stop()


async def _amain(argv: Sequence[str] | None) -> None:
    args = _build_parser().parse_args(list(argv) if argv is not None else None)
    ctx = create_runtime_context()

    if args.command == "status":
        await _status(ctx, days=args.days, as_json=args.json)
    elif args.command == "check-in":
        controller = ctx.create_controller()
        print(format_status(await controller.check_in()))
        if controller.streak is not None:
            print(format_streak(controller.streak))
    elif args.command == "set-length":
        print(format_status(await ctx.create_controller().set_protocol_length(args.days)))
    elif args.command == "reminder-interval":
        ctx.reminder_service.set_interval(args.minutes)
    elif args.command == "watch":
        await _watch(ctx)
    elif args.command == "remind":
        await _remind(ctx, once=args.once)


def main(argv: Sequence[str] | None = None) -> None:
    init_logging()
    try:
        asyncio.run(_amain(argv))
    except KeyboardInterrupt:
        raise SystemExit(130) from None
    except (ValueError, RuntimeError) as exc:
        raise SystemExit(str(exc)) from exc


__all__ = ["format_status", "format_streak", "main"]

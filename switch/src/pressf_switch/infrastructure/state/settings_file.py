"""Filesystem-backed settings store holding one camelCase JSON document."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from threading import Lock
from typing import Any

from pydantic import ValidationError

from pressf_commons.errors import SettingsStoreError
from pressf_switch.application.dto.settings import SettingsUpdate, StoredSettings

logger = logging.getLogger("pressf_switch.infrastructure.settings_file")


class JsonFileSettingsStore:
    """Persist and query switch settings in a JSON file.

    A missing file reads as empty settings. Keys this store does not know
    about are carried through writes untouched.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._lock = Lock()

    @property
    def path(self) -> Path:
        return self._path

    # ------------------------------------------------------------------
    # public API

    def get_settings(self) -> StoredSettings:
        with self._lock:
            return self._validate(self._read_document())

    def update_settings(self, update: SettingsUpdate) -> None:
        with self._lock:
            document = self._read_document()
            for key, value in update.to_storage().items():
                if value is None:
                    document.pop(key, None)
                else:
                    document[key] = value
            self._validate(document)
            self._write_document(document)
        logger.debug("settings written", extra={"data": {"path": str(self._path), "keys": sorted(update.changes())}})

    # ------------------------------------------------------------------
    # helpers

    def _read_document(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        text = self._path.read_text(encoding="utf-8").strip()
        if not text:
            return {}
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SettingsStoreError(f"settings file {self._path} is not valid JSON") from exc
        if not isinstance(raw, dict):
            raise SettingsStoreError(f"settings file {self._path} must hold a JSON object")
        return raw

    def _validate(self, document: dict[str, Any]) -> StoredSettings:
        try:
            return StoredSettings.model_validate(document)
        except ValidationError as exc:
            raise SettingsStoreError(f"settings file {self._path} holds invalid settings: {exc}") from exc

    def _write_document(self, document: dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = Path(f"{self._path}.tmp")
        tmp_path.write_text(json.dumps(document, indent=2, sort_keys=True), encoding="utf-8")
        os.replace(tmp_path, self._path)


__all__ = ["JsonFileSettingsStore"]

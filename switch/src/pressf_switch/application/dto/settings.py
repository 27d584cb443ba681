"""Persisted settings contracts exchanged with the settings store."""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class StoredSettings(BaseModel):
    """Settings document as the store holds it; every field may be missing."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    protocol_length_days: int | None = Field(default=None, alias="protocolLengthDays")
    last_check_in_timestamp: int | None = Field(default=None, alias="lastCheckInTimestamp")
    checkin_reminder_interval_minutes: int | None = Field(
        default=None, alias="checkinReminderIntervalMinutes"
    )
    checkin_notified_at: int | None = Field(default=None, alias="checkinNotifiedAt")
    notifications_enabled: bool = Field(default=True, alias="notificationsEnabled")
    current_streak: int | None = Field(default=None, alias="currentStreak")
    longest_streak: int | None = Field(default=None, alias="longestStreak")
    last_streak_date: date | None = Field(default=None, alias="lastStreakDate")
    streak_free_skips: int | None = Field(default=None, alias="streakFreeSkips")

    def apply(self, update: SettingsUpdate) -> StoredSettings:
        """Return a copy with the explicitly set fields of ``update`` applied."""

        return self.model_copy(update=update.changes())

    def to_storage(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class SettingsUpdate(BaseModel):
    """Partial write request; only fields set explicitly are applied.

    ``checkin_notified_at=None`` set explicitly clears the stored value.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )

    protocol_length_days: int | None = Field(default=None, alias="protocolLengthDays")
    last_check_in_timestamp: int | None = Field(default=None, alias="lastCheckInTimestamp")
    checkin_reminder_interval_minutes: int | None = Field(
        default=None, alias="checkinReminderIntervalMinutes"
    )
    checkin_notified_at: int | None = Field(default=None, alias="checkinNotifiedAt")
    notifications_enabled: bool | None = Field(default=None, alias="notificationsEnabled")
    current_streak: int | None = Field(default=None, alias="currentStreak")
    longest_streak: int | None = Field(default=None, alias="longestStreak")
    last_streak_date: date | None = Field(default=None, alias="lastStreakDate")
    streak_free_skips: int | None = Field(default=None, alias="streakFreeSkips")

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)

    def to_storage(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


__all__ = ["SettingsUpdate", "StoredSettings"]

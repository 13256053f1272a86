# SPDX-License-Identifier: MIT

from typing import Any, Optional, cast

from dailystreak import time
from dailystreak.model.streak import Streak
from dailystreak.repository.base import RecordRepository

StreakKey = tuple[str, str]


class StreakRepository(RecordRepository[StreakKey, Streak]):
    def _key(self, record: Streak) -> StreakKey:
        return (record["user_id"], record["task_id"])

    def _convert_for_serialization(self, streak: Streak) -> dict[str, Any]:
        serializable_streak = cast(dict[str, Any], streak)
        serializable_streak["last_completed_day"] = time.day_to_str_optional(
            serializable_streak["last_completed_day"]
        )
        serializable_streak["created"] = time.datetime_to_iso_str(
            serializable_streak["created"]
        )
        serializable_streak["updated"] = time.datetime_to_iso_str(
            serializable_streak["updated"]
        )
        return serializable_streak

    def _convert_for_deserialization(self, streak: dict[str, Any]) -> Streak:
        deserializable_streak = streak
        deserializable_streak["last_completed_day"] = time.day_from_str_optional(
            deserializable_streak["last_completed_day"]
        )
        deserializable_streak["created"] = time.datetime_from_str(
            deserializable_streak["created"]
        )
        deserializable_streak["updated"] = time.datetime_from_str(
            deserializable_streak["updated"]
        )
        return cast(Streak, deserializable_streak)

    def get_streak(self, user_id: str, task_id: str) -> Optional[Streak]:
        return self._get((user_id, task_id))

    def save_streak(self, streak: Streak) -> Streak:
        with self._lock:
            streak["updated"] = self._clock()
            return self._put(streak)

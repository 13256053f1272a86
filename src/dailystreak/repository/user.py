# SPDX-License-Identifier: MIT

from typing import Any, Optional, cast

from dailystreak import time
from dailystreak.model.user import User
from dailystreak.repository.base import RecordRepository


class UserRepository(RecordRepository[str, User]):
    def _key(self, record: User) -> str:
        return record["user_id"]

    def _convert_for_serialization(self, user: User) -> dict[str, Any]:
        serializable_user = cast(dict[str, Any], user)
        serializable_user["created"] = time.datetime_to_iso_str(
            serializable_user["created"]
        )
        serializable_user["updated"] = time.datetime_to_iso_str(
            serializable_user["updated"]
        )
        return serializable_user

    def _convert_for_deserialization(self, user: dict[str, Any]) -> User:
        deserializable_user = user
        deserializable_user["created"] = time.datetime_from_str(
            deserializable_user["created"]
        )
        deserializable_user["updated"] = time.datetime_from_str(
            deserializable_user["updated"]
        )
        selected_tasks = deserializable_user.get("selected_tasks") or {}
        deserializable_user["selected_tasks"] = {
            "career": list(selected_tasks.get("career") or []),
            "personal": list(selected_tasks.get("personal") or []),
            "custom": list(selected_tasks.get("custom") or []),
        }
        return cast(User, deserializable_user)

    def get_user(self, user_id: str) -> Optional[User]:
        return self._get(user_id)

    def save_user(self, user: User) -> User:
        with self._lock:
            user["updated"] = self._clock()
            return self._put(user)

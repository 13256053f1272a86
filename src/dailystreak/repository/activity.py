# SPDX-License-Identifier: MIT

import logging
from typing import Any, Optional, Union, cast

import pendulum

from dailystreak import time
from dailystreak.model.activity import Activity
from dailystreak.repository.base import RecordRepository
from dailystreak.template.activity import get_activity_template

logger = logging.getLogger(__name__)

ActivityKey = tuple[str, str, str]  # (user_id, task_id, YYYY-MM-DD)


class ActivityRepository(RecordRepository[ActivityKey, Activity]):
    def _key(self, record: Activity) -> ActivityKey:
        return (record["user_id"], record["task_id"], time.day_to_str(record["day"]))

    def _convert_for_serialization(self, activity: Activity) -> dict[str, Any]:
        serializable_activity = cast(dict[str, Any], activity)
        serializable_activity["day"] = time.day_to_str(serializable_activity["day"])
        serializable_activity["created"] = time.datetime_to_iso_str(
            serializable_activity["created"]
        )
        serializable_activity["updated"] = time.datetime_to_iso_str(
            serializable_activity["updated"]
        )
        return serializable_activity

    def _convert_for_deserialization(self, activity: dict[str, Any]) -> Activity:
        deserializable_activity = activity
        deserializable_activity["day"] = time.day_from_str(deserializable_activity["day"])
        deserializable_activity["created"] = time.datetime_from_str(
            deserializable_activity["created"]
        )
        deserializable_activity["updated"] = time.datetime_from_str(
            deserializable_activity["updated"]
        )
        if deserializable_activity.get("notes") is None:
            deserializable_activity["notes"] = ""
        return cast(Activity, deserializable_activity)

    def record_activity(
        self,
        user_id: str,
        task_id: str,
        day: pendulum.Date,
        completed: bool,
        value: Optional[Union[int, float]],
        notes: str,
    ) -> Activity:
        """
        Upsert the activity for (user_id, task_id, day).

        An existing record keeps its id and created timestamp; completed, value,
        notes and updated are replaced together.
        """
        with self._lock:
            now = self._clock()
            activity = self._get((user_id, task_id, time.day_to_str(day)))
            if activity is None:
                activity = get_activity_template(user_id, task_id, day, now)
                logger.debug("Creating activity %s/%s on %s", user_id, task_id, day)
            else:
                activity["updated"] = now
                logger.debug("Updating activity %s/%s on %s", user_id, task_id, day)
            activity["completed"] = completed
            activity["value"] = value
            activity["notes"] = notes
            return self._put(activity)

    def get_activity(
        self, user_id: str, task_id: str, day: pendulum.Date
    ) -> Optional[Activity]:
        return self._get((user_id, task_id, time.day_to_str(day)))

    def get_activities_in_range(
        self, user_id: str, from_day: pendulum.Date, to_day: pendulum.Date
    ) -> list[Activity]:
        """All of a user's activities with from_day <= day <= to_day, by day then task."""
        activities = self._select(
            lambda activity: activity["user_id"] == user_id
            and from_day <= activity["day"] <= to_day
        )
        return sorted(
            activities, key=lambda activity: (activity["day"], activity["task_id"])
        )

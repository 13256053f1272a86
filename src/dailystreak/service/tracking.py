# SPDX-License-Identifier: MIT

import logging
from typing import Any, Callable, Optional, TypedDict, Union

import pendulum

from dailystreak.exceptions import UnknownUserError, ValidationError
from dailystreak.model.activity import Activity
from dailystreak.model.dashboard import Dashboard
from dailystreak.model.streak import Streak
from dailystreak.model.task import SelectedTasks
from dailystreak.model.user import User
from dailystreak.repository.store import ActivityStore, StreakStore, UserStore
from dailystreak.service.dashboard import DashboardAggregator
from dailystreak.service.locks import KeyedLock
from dailystreak.service.streak import StreakTracker
from dailystreak.service.validation import (
    get_selected_task_ids,
    validate_completed,
    validate_identifier,
    validate_notes,
    validate_selected_tasks,
    validate_value,
)
from dailystreak.template.user import get_user_template
from dailystreak.time import now_utc, to_day

logger = logging.getLogger(__name__)


class CompletionAck(TypedDict):
    ok: bool
    activity: Activity
    streak: Streak


class TrackingService:
    """
    Operations exposed to transports: selecting tasks, recording completions
    and building the dashboard.

    Store handles are passed in; nothing here is process-global. Each write
    operation flushes the stores it touched before returning, so persistence
    failures surface to the caller as StoreError.
    """

    def __init__(
        self,
        activities: ActivityStore,
        streaks: StreakStore,
        users: UserStore,
        clock: Callable[[], pendulum.DateTime] = now_utc,
    ) -> None:
        self._activities = activities
        self._streaks = streaks
        self._users = users
        self._clock = clock
        self._tracker = StreakTracker(streaks, clock)
        self._aggregator = DashboardAggregator(users, activities, streaks)
        self._task_locks = KeyedLock()
        self._user_locks = KeyedLock()

    def register_user(self, user_id: str, name: Optional[str] = None) -> User:
        user_id = validate_identifier(user_id, "user id")
        if name is not None:
            name = validate_identifier(name, "name").strip()

        with self._user_locks.hold(user_id):
            user = self._users.get_user(user_id)
            if user is None:
                user = get_user_template(user_id, self._clock())
                logger.info("Registering user %s", user_id)
            if name is not None:
                user["name"] = name
            user = self._users.save_user(user)
            self._users.flush()
            return user

    def get_user(self, user_id: str) -> User:
        user_id = validate_identifier(user_id, "user id")
        user = self._users.get_user(user_id)
        if user is None:
            raise UnknownUserError(user_id)
        return user

    def get_selected_tasks(self, user_id: str) -> SelectedTasks:
        return self.get_user(user_id)["selected_tasks"]

    def set_selected_tasks(self, user_id: str, selected_tasks: Any) -> SelectedTasks:
        """
        Replace the user's selection, establishing the user if needed.

        Every selected id gets streak state; ids dropped from the selection
        keep theirs.
        """
        user_id = validate_identifier(user_id, "user id")
        normalized = validate_selected_tasks(selected_tasks)

        with self._user_locks.hold(user_id):
            user = self._users.get_user(user_id)
            if user is None:
                user = get_user_template(user_id, self._clock())
                logger.info("Registering user %s", user_id)

            for task_id, _ in get_selected_task_ids(normalized):
                with self._task_locks.hold((user_id, task_id)):
                    self._tracker.ensure_tracked(user_id, task_id)

            user["selected_tasks"] = normalized
            self._users.save_user(user)

            self._streaks.flush()
            self._users.flush()

        logger.info(
            "Selection for %s: %d career, %d personal, %d custom",
            user_id,
            len(normalized["career"]),
            len(normalized["personal"]),
            len(normalized["custom"]),
        )
        return normalized

    def record_completion(
        self,
        user_id: str,
        task_id: str,
        day: pendulum.Date,
        completed: bool,
        value: Optional[Union[int, float]] = None,
        notes: Optional[str] = None,
    ) -> CompletionAck:
        """Record the day's activity for a selected task and advance its streak."""
        user = self.get_user(user_id)
        task_id = validate_identifier(task_id, "task id")
        day = to_day(day)
        completed = validate_completed(completed)
        value = validate_value(task_id, value)
        notes = validate_notes(notes)

        selected_ids = [
            selected_id
            for selected_id, _ in get_selected_task_ids(user["selected_tasks"])
        ]
        if task_id not in selected_ids:
            logger.info("Rejected completion of unselected task %s/%s", user_id, task_id)
            raise ValidationError(f"Task '{task_id}' is not selected by user '{user_id}'")

        with self._task_locks.hold((user_id, task_id)):
            activity = self._activities.record_activity(
                user_id, task_id, day, completed, value, notes
            )
            streak = self._tracker.apply_completion(user_id, task_id, day, completed)

            self._activities.flush()
            self._streaks.flush()

        return {"ok": True, "activity": activity, "streak": streak}

    def get_dashboard(self, user_id: str, as_of_day: pendulum.Date) -> Dashboard:
        user_id = validate_identifier(user_id, "user id")
        return self._aggregator.build_dashboard(user_id, to_day(as_of_day))

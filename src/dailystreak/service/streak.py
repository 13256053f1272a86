# SPDX-License-Identifier: MIT

import logging
from typing import Callable, Optional

import pendulum

from dailystreak.model.streak import Streak
from dailystreak.repository.store import StreakStore
from dailystreak.template.streak import get_streak_template
from dailystreak.time import now_utc

logger = logging.getLogger(__name__)


class StreakTracker:
    """
    Sole writer of per-task streak state.

    State is advanced incrementally, once per completion event, and is never
    recomputed from the activity history.
    """

    def __init__(
        self,
        store: StreakStore,
        clock: Callable[[], pendulum.DateTime] = now_utc,
    ) -> None:
        self._store = store
        self._clock = clock

    def ensure_tracked(self, user_id: str, task_id: str) -> Streak:
        streak = self._store.get_streak(user_id, task_id)
        if streak is not None:
            return streak
        logger.debug("Tracking streak for %s/%s", user_id, task_id)
        return self._store.save_streak(
            get_streak_template(user_id, task_id, self._clock())
        )

    def get_streak(self, user_id: str, task_id: str) -> Optional[Streak]:
        return self._store.get_streak(user_id, task_id)

    def apply_completion(
        self, user_id: str, task_id: str, day: pendulum.Date, completed: bool
    ) -> Streak:
        """
        Advance the streak for a completion recorded on `day`.

        Unchecking a day never decrements, and a day already counted is not
        counted twice. Any other completed day increments the streak whether
        or not it follows the previous one; skipped days do not reset it.
        """
        streak = self.ensure_tracked(user_id, task_id)

        if not completed:
            return streak
        if streak["last_completed_day"] == day:
            return streak

        streak["current_streak"] += 1
        streak["best_streak"] = max(streak["best_streak"], streak["current_streak"])
        streak["total_days_completed"] += 1
        streak["last_completed_day"] = day

        logger.info(
            "Streak for %s/%s is now %d (best %d)",
            user_id,
            task_id,
            streak["current_streak"],
            streak["best_streak"],
        )
        return self._store.save_streak(streak)

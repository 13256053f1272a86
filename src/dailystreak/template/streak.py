# SPDX-License-Identifier: MIT

import pendulum

from dailystreak.model.entity_type import EntityType
from dailystreak.model.streak import Streak


def get_streak_template(user_id: str, task_id: str, now: pendulum.DateTime) -> Streak:
    return {
        "id": None,
        "entity_type": EntityType.STREAK,
        "user_id": user_id,
        "task_id": task_id,
        "current_streak": 0,
        "best_streak": 0,
        "total_days_completed": 0,
        "last_completed_day": None,
        "created": now,
        "updated": now,
    }

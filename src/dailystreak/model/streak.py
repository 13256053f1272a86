# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from dailystreak.model.entity_id import EntityId


class Streak(TypedDict):
    id: Optional[EntityId]
    entity_type: str  # "streak"
    user_id: str
    task_id: str
    current_streak: int
    best_streak: int  # Never below current_streak
    total_days_completed: int
    last_completed_day: Optional[pendulum.Date]
    created: pendulum.DateTime
    updated: pendulum.DateTime

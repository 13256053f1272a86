# SPDX-License-Identifier: MIT

import pendulum

from dailystreak.model.activity import Activity
from dailystreak.model.entity_type import EntityType


def get_activity_template(
    user_id: str, task_id: str, day: pendulum.Date, now: pendulum.DateTime
) -> Activity:
    return {
        "id": None,
        "entity_type": EntityType.ACTIVITY,
        "user_id": user_id,
        "task_id": task_id,
        "day": day,
        "completed": False,
        "value": None,
        "notes": "",
        "created": now,
        "updated": now,
    }

# SPDX-License-Identifier: MIT

import pendulum

from dailystreak.model.entity_type import EntityType
from dailystreak.model.task import SelectedTasks
from dailystreak.model.user import User


def get_selected_tasks_template() -> SelectedTasks:
    return {"career": [], "personal": [], "custom": []}


def get_user_template(user_id: str, now: pendulum.DateTime) -> User:
    return {
        "id": None,
        "entity_type": EntityType.USER,
        "user_id": user_id,
        "name": user_id,
        "selected_tasks": get_selected_tasks_template(),
        "created": now,
        "updated": now,
    }

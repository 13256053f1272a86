# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from dailystreak.model.entity_id import EntityId
from dailystreak.model.task import SelectedTasks


class User(TypedDict):
    id: Optional[EntityId]
    entity_type: str  # "user"
    user_id: str  # Identifier handed in by the authenticating caller
    name: str
    selected_tasks: SelectedTasks
    created: pendulum.DateTime
    updated: pendulum.DateTime

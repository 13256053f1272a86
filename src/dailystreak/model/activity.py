# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict, Union

import pendulum

from dailystreak.model.entity_id import EntityId


class Activity(TypedDict):
    id: Optional[EntityId]
    entity_type: str  # "activity"
    user_id: str
    task_id: str
    day: pendulum.Date  # Calendar day the completion applies to
    completed: bool
    value: Optional[Union[int, float]]  # Only for rated tasks, e.g. 0-10 productivity
    notes: str
    created: pendulum.DateTime
    updated: pendulum.DateTime

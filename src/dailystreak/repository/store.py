# SPDX-License-Identifier: MIT

from typing import Optional, Protocol, Union

import pendulum

from dailystreak.model.activity import Activity
from dailystreak.model.streak import Streak
from dailystreak.model.user import User


class ActivityStore(Protocol):
    def record_activity(
        self,
        user_id: str,
        task_id: str,
        day: pendulum.Date,
        completed: bool,
        value: Optional[Union[int, float]],
        notes: str,
    ) -> Activity: ...

    def get_activity(
        self, user_id: str, task_id: str, day: pendulum.Date
    ) -> Optional[Activity]: ...

    def get_activities_in_range(
        self, user_id: str, from_day: pendulum.Date, to_day: pendulum.Date
    ) -> list[Activity]: ...

    def flush(self) -> bool: ...


class StreakStore(Protocol):
    def get_streak(self, user_id: str, task_id: str) -> Optional[Streak]: ...

    def save_streak(self, streak: Streak) -> Streak: ...

    def flush(self) -> bool: ...


class UserStore(Protocol):
    def get_user(self, user_id: str) -> Optional[User]: ...

    def save_user(self, user: User) -> User: ...

    def flush(self) -> bool: ...

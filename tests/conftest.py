# SPDX-License-Identifier: MIT

import pendulum
import pytest

from dailystreak.repository.activity import ActivityRepository
from dailystreak.repository.streak import StreakRepository
from dailystreak.repository.user import UserRepository
from dailystreak.service.tracking import TrackingService


class FakeClock:
    def __init__(self) -> None:
        self.now = pendulum.datetime(2024, 3, 1, 12, 0, tz="UTC")

    def __call__(self) -> pendulum.DateTime:
        return self.now

    def advance(self, **kwargs: int) -> None:
        self.now = self.now.add(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def day() -> pendulum.Date:
    return pendulum.date(2024, 3, 4)


@pytest.fixture
def activities(clock: FakeClock) -> ActivityRepository:
    return ActivityRepository(clock=clock)


@pytest.fixture
def streaks(clock: FakeClock) -> StreakRepository:
    return StreakRepository(clock=clock)


@pytest.fixture
def users(clock: FakeClock) -> UserRepository:
    return UserRepository(clock=clock)


@pytest.fixture
def service(
    activities: ActivityRepository,
    streaks: StreakRepository,
    users: UserRepository,
    clock: FakeClock,
) -> TrackingService:
    return TrackingService(activities, streaks, users, clock=clock)

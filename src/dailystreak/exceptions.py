# SPDX-License-Identifier: MIT


class DailyStreakError(Exception):
    """Base class for errors surfaced by dailystreak operations."""

    pass


class UnknownUserError(DailyStreakError):
    """Raised when an operation references a user that was never established."""

    def __init__(self, user_id: str) -> None:
        super().__init__(f"Unknown user: '{user_id}'")
        self.user_id = user_id


class ValidationError(DailyStreakError):
    """Raised when malformed or out-of-domain input reaches the core."""

    pass


class StoreError(DailyStreakError):
    """Raised when the persistence layer fails. The cause is chained."""

    pass

# SPDX-License-Identifier: MIT


class EntityType:
    ACTIVITY = "activity"
    STREAK = "streak"
    USER = "user"

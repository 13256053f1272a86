# SPDX-License-Identifier: MIT

import pendulum
import pytest

from dailystreak.exceptions import UnknownUserError
from dailystreak.service.dashboard import TREND_DAYS, percentage
from dailystreak.service.tracking import TrackingService


@pytest.fixture
def alice(service: TrackingService) -> TrackingService:
    service.register_user("alice", "Alice Smith")
    service.set_selected_tasks(
        "alice",
        {"career": ["github"], "personal": ["productivity"], "custom": ["Read 20 pages"]},
    )
    return service


def test_percentage_rounds_halves_up():
    assert percentage(1, 8) == 13
    assert percentage(1, 3) == 33
    assert percentage(2, 3) == 67
    assert percentage(3, 3) == 100
    assert percentage(0, 5) == 0
    assert percentage(0, 0) == 0


def test_tasks_are_listed_in_group_order_with_names(alice: TrackingService, day):
    dashboard = alice.get_dashboard("alice", day)

    assert dashboard["user"] == {"id": "alice", "name": "Alice Smith"}
    assert [(t["id"], t["name"], t["group"]) for t in dashboard["tasks"]] == [
        ("github", "GitHub Commits", "career"),
        ("productivity", "Daily Productivity Rating", "personal"),
        ("Read 20 pages", "Read 20 pages", "custom"),
    ]


def test_missing_activity_maps_to_defaults(alice: TrackingService, day):
    task = alice.get_dashboard("alice", day)["tasks"][0]

    assert task["completed"] is False
    assert task["value"] is None
    assert task["notes"] == ""
    assert task["current_streak"] == 0


def test_todays_activity_and_streaks_are_joined(alice: TrackingService, day):
    alice.record_completion("alice", "github", day.subtract(days=1), True)
    alice.record_completion("alice", "github", day, True, notes="two PRs")
    alice.record_completion("alice", "productivity", day, False, value=7)

    tasks = {t["id"]: t for t in alice.get_dashboard("alice", day)["tasks"]}

    assert tasks["github"]["completed"] is True
    assert tasks["github"]["notes"] == "two PRs"
    assert tasks["github"]["current_streak"] == 2
    assert tasks["github"]["best_streak"] == 2
    assert tasks["github"]["total_days_completed"] == 2
    assert tasks["productivity"]["completed"] is False
    assert tasks["productivity"]["value"] == 7


def test_stats(alice: TrackingService, day):
    alice.record_completion("alice", "github", day, True)
    alice.record_completion("alice", "Read 20 pages", day.subtract(days=3), True)

    stats = alice.get_dashboard("alice", day)["stats"]

    assert stats["total_tasks"] == 3
    assert stats["completed_today"] == 1
    assert stats["completion_rate"] == 33
    assert stats["total_current_streaks"] == 2


def test_average_rating_uses_rated_values_in_window(alice: TrackingService, day):
    assert alice.get_dashboard("alice", day)["stats"]["average_rating"] is None

    alice.record_completion("alice", "productivity", day, True, value=7)
    alice.record_completion("alice", "productivity", day.subtract(days=1), True, value=8)
    alice.record_completion(
        "alice", "productivity", day.subtract(days=TREND_DAYS), True, value=0
    )

    assert alice.get_dashboard("alice", day)["stats"]["average_rating"] == 7.5


def test_average_rating_rounds_halves_up(alice: TrackingService, day):
    alice.record_completion("alice", "productivity", day, True, value=7)
    alice.record_completion(
        "alice", "productivity", day.subtract(days=1), True, value=7.5
    )

    assert alice.get_dashboard("alice", day)["stats"]["average_rating"] == 7.3


def test_trend_has_thirty_points_ending_at_as_of_day(alice: TrackingService, day):
    trend = alice.get_dashboard("alice", day)["trend"]

    assert len(trend) == TREND_DAYS
    assert trend[0]["date"] == day.subtract(days=TREND_DAYS - 1).to_date_string()
    assert trend[-1]["date"] == day.to_date_string()
    assert [point["date"] for point in trend] == sorted(point["date"] for point in trend)


def test_trend_counts_completed_records_per_day(alice: TrackingService, day):
    yesterday = day.subtract(days=1)
    alice.record_completion("alice", "github", yesterday, True)
    alice.record_completion("alice", "productivity", yesterday, True, value=5)
    alice.record_completion("alice", "Read 20 pages", yesterday, False)
    alice.record_completion("alice", "github", day, True)
    alice.record_completion(
        "alice", "github", day.subtract(days=TREND_DAYS), True
    )

    trend = alice.get_dashboard("alice", day)["trend"]

    assert trend[-2] == {
        "date": yesterday.to_date_string(),
        "completed": 2,
        "total": 3,
        "percentage": 67,
    }
    assert trend[-1]["completed"] == 1
    assert trend[-1]["percentage"] == 33
    assert sum(point["completed"] for point in trend) == 3


def test_trend_uses_current_selection_size_for_every_day(
    alice: TrackingService, day
):
    alice.record_completion("alice", "github", day.subtract(days=10), True)
    alice.set_selected_tasks("alice", {"career": ["github"]})

    trend = alice.get_dashboard("alice", day)["trend"]

    assert {point["total"] for point in trend} == {1}
    assert trend[-11]["percentage"] == 100


def test_dashboard_is_read_only(alice: TrackingService, day):
    alice.record_completion("alice", "github", day, True)

    first = alice.get_dashboard("alice", day)
    second = alice.get_dashboard("alice", day)

    assert first == second


def test_dashboard_as_of_an_earlier_day(alice: TrackingService):
    alice.record_completion("alice", "github", pendulum.date(2024, 3, 1), True)

    dashboard = alice.get_dashboard("alice", pendulum.date(2024, 3, 1))

    assert dashboard["stats"]["completed_today"] == 1
    assert dashboard["trend"][-1]["date"] == "2024-03-01"


def test_unknown_user(service: TrackingService, day):
    with pytest.raises(UnknownUserError):
        service.get_dashboard("nobody", day)

# SPDX-License-Identifier: MIT

from dailystreak.repository.activity import ActivityRepository


def test_record_activity_creates_record(activities: ActivityRepository, clock, day):
    activity = activities.record_activity("alice", "github", day, True, None, "")

    assert activity["id"] is not None
    assert activity["completed"] is True
    assert activity["value"] is None
    assert activity["notes"] == ""
    assert activity["created"] == clock.now
    assert activity["updated"] == clock.now


def test_second_write_for_same_day_updates_in_place(
    activities: ActivityRepository, clock, day
):
    first = activities.record_activity("alice", "productivity", day, True, 6, "ok")
    clock.advance(hours=2)
    second = activities.record_activity(
        "alice", "productivity", day, False, 8, "better"
    )

    assert second["id"] == first["id"]
    assert second["created"] == first["created"]
    assert second["updated"] == clock.now
    assert second["completed"] is False
    assert second["value"] == 8
    assert second["notes"] == "better"
    assert len(activities.get_activities_in_range("alice", day, day)) == 1


def test_get_activity_is_keyed_by_user_task_and_day(
    activities: ActivityRepository, day
):
    activities.record_activity("alice", "github", day, True, None, "")

    assert activities.get_activity("alice", "github", day) is not None
    assert activities.get_activity("alice", "github", day.add(days=1)) is None
    assert activities.get_activity("alice", "chess", day) is None
    assert activities.get_activity("bob", "github", day) is None


def test_returned_records_are_copies(activities: ActivityRepository, day):
    activity = activities.record_activity("alice", "github", day, True, None, "")
    activity["completed"] = False

    stored = activities.get_activity("alice", "github", day)
    assert stored is not None
    assert stored["completed"] is True


def test_range_scan_is_inclusive_and_ordered_by_day(
    activities: ActivityRepository, day
):
    activities.record_activity("alice", "github", day.add(days=2), True, None, "")
    activities.record_activity("alice", "chess", day, True, None, "")
    activities.record_activity("alice", "github", day, False, None, "")
    activities.record_activity("alice", "github", day.add(days=5), True, None, "")
    activities.record_activity("bob", "github", day.add(days=1), True, None, "")

    scanned = activities.get_activities_in_range("alice", day, day.add(days=2))

    assert [(a["day"], a["task_id"]) for a in scanned] == [
        (day, "chess"),
        (day, "github"),
        (day.add(days=2), "github"),
    ]


def test_range_scan_reflects_later_writes(activities: ActivityRepository, day):
    assert activities.get_activities_in_range("alice", day, day) == []

    activities.record_activity("alice", "github", day, True, None, "")

    assert len(activities.get_activities_in_range("alice", day, day)) == 1


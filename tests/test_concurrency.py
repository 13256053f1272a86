# SPDX-License-Identifier: MIT

from concurrent.futures import ThreadPoolExecutor

from dailystreak.service.tracking import TrackingService


def test_concurrent_same_day_completions_count_once(service: TrackingService, day):
    service.set_selected_tasks("alice", {"career": ["github"]})

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(
            pool.map(
                lambda _: service.record_completion("alice", "github", day, True),
                range(32),
            )
        )

    assert all(ack["ok"] for ack in results)
    task = service.get_dashboard("alice", day)["tasks"][0]
    assert task["current_streak"] == 1
    assert task["total_days_completed"] == 1


def test_concurrent_completions_across_tasks_and_days(service: TrackingService, day):
    task_ids = ["github", "leetcode", "gfg", "chess"]
    service.set_selected_tasks("alice", {"career": task_ids})
    work = [(task_id, offset) for task_id in task_ids for offset in range(5)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(
            pool.map(
                lambda item: service.record_completion(
                    "alice", item[0], day.subtract(days=item[1]), True
                ),
                work,
            )
        )

    dashboard = service.get_dashboard("alice", day)
    assert [task["total_days_completed"] for task in dashboard["tasks"]] == [5] * 4
    assert dashboard["stats"]["completed_today"] == 4
    assert [point["completed"] for point in dashboard["trend"][-5:]] == [4] * 5

# SPDX-License-Identifier: MIT

from pathlib import Path

import pytest
from yaml import safe_dump, safe_load

from dailystreak import configuration
from dailystreak.configuration import get_default_configuration
from dailystreak.exceptions import StoreError, ValidationError
from dailystreak.initialize import build_service, initialize
from dailystreak.repository.activity import ActivityRepository
from dailystreak.repository.configuration import ConfigurationRepository
from dailystreak.service.tracking import TrackingService


def _yaml_service(data_path: Path) -> TrackingService:
    config = get_default_configuration()
    config["data_path"] = str(data_path)
    return build_service(config)


def test_state_survives_a_new_service(tmp_path: Path, day):
    service = _yaml_service(tmp_path)
    service.register_user("alice", "Alice Smith")
    service.set_selected_tasks(
        "alice", {"career": ["github"], "personal": ["productivity"]}
    )
    service.record_completion("alice", "github", day, True, notes="shipped")
    service.record_completion("alice", "productivity", day, True, value=8)

    reloaded = _yaml_service(tmp_path)
    dashboard = reloaded.get_dashboard("alice", day)

    assert dashboard["user"]["name"] == "Alice Smith"
    tasks = {task["id"]: task for task in dashboard["tasks"]}
    assert tasks["github"]["completed"] is True
    assert tasks["github"]["notes"] == "shipped"
    assert tasks["github"]["current_streak"] == 1
    assert tasks["productivity"]["value"] == 8

    # Re-completing the same day after a reload is still counted once.
    reloaded.record_completion("alice", "github", day, True)
    reloaded.record_completion("alice", "github", day.add(days=1), True)
    tasks = {task["id"]: task for task in reloaded.get_dashboard("alice", day)["tasks"]}
    assert tasks["github"]["current_streak"] == 2


def test_one_file_per_record(tmp_path: Path, day):
    service = _yaml_service(tmp_path)
    service.set_selected_tasks("alice", {"career": ["github"]})
    service.record_completion("alice", "github", day, True)
    service.record_completion("alice", "github", day, False)

    activity_files = list((tmp_path / "activities").glob("*.yaml"))
    assert len(activity_files) == 1
    stored = safe_load(activity_files[0].read_text())
    assert stored["day"] == day.to_date_string()
    assert stored["completed"] is False
    assert len(list((tmp_path / "streaks").glob("*.yaml"))) == 1
    assert len(list((tmp_path / "users").glob("*.yaml"))) == 1


def test_memory_storage_writes_nothing(tmp_path: Path, day):
    config = get_default_configuration()
    config["storage"] = "memory"
    config["data_path"] = str(tmp_path)
    service = build_service(config)

    service.set_selected_tasks("alice", {"career": ["github"]})
    service.record_completion("alice", "github", day, True)

    assert list(tmp_path.iterdir()) == []


def test_write_failure_surfaces_as_store_error(tmp_path: Path, day):
    blocked = tmp_path / "activities"
    blocked.write_text("not a directory")
    repository = ActivityRepository(blocked)
    repository.record_activity("alice", "github", day, True, None, "")

    with pytest.raises(StoreError) as excinfo:
        repository.flush()

    assert isinstance(excinfo.value.__cause__, OSError)


def test_corrupt_record_surfaces_as_store_error(tmp_path: Path, day):
    (tmp_path / "broken.yaml").write_text("day: [2024-03-04\n")
    repository = ActivityRepository(tmp_path)

    with pytest.raises(StoreError):
        repository.get_activity("alice", "github", day)


def test_initialize_writes_default_config(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(configuration, "DEFAULT_DATA_PATH", tmp_path / "data")
    path = tmp_path / "cfg" / "config.yaml"

    config = initialize(ConfigurationRepository(path))

    assert path.is_file()
    assert safe_load(path.read_text()) == get_default_configuration()
    assert config == get_default_configuration()
    assert sorted(p.name for p in (tmp_path / "data").iterdir()) == [
        "activities",
        "streaks",
        "users",
    ]


def test_initialize_keeps_an_existing_config(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(safe_dump({"storage": "memory", "default_user": "bob"}))

    config = initialize(ConfigurationRepository(path))

    assert config["default_user"] == "bob"
    assert safe_load(path.read_text()) == {"storage": "memory", "default_user": "bob"}


@pytest.mark.parametrize(
    "content",
    [
        "- yaml\n- memory\n",
        "just a string\n",
        "storage: sqlite\n",
        "log_level: loud\n",
        "default_user: [bob]\n",
    ],
)
def test_invalid_config_file_raises_store_error(tmp_path: Path, content: str):
    path = tmp_path / "config.yaml"
    path.write_text(content)

    with pytest.raises(StoreError):
        ConfigurationRepository(path).get_config()


def test_build_service_rejects_unknown_storage():
    config = get_default_configuration()
    config["storage"] = "sqlite"  # type: ignore[typeddict-item]

    with pytest.raises(ValidationError):
        build_service(config)

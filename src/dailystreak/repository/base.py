# SPDX-License-Identifier: MIT

import logging
import threading
from copy import deepcopy
from pathlib import Path
from typing import Any, Callable, Generic, Hashable, Optional, TypeVar

import pendulum
from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper  # noqa: F401
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from dailystreak.exceptions import StoreError
from dailystreak.model.entity_id import generate_entity_id
from dailystreak.time import now_utc

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
R = TypeVar("R")


class RecordRepository(Generic[K, R]):
    """
    Keyed record store backed by process memory, optionally persisted as one
    YAML file per record in `data_dir`.

    Records are loaded lazily on first access and only records changed since
    the last flush are written back. Writers swap whole records under the
    repository lock and readers get deep copies, so a reader never observes
    a half-updated record.
    """

    def __init__(
        self,
        data_dir: Optional[Path] = None,
        clock: Callable[[], pendulum.DateTime] = now_utc,
    ) -> None:
        self._data_dir = data_dir
        self._clock = clock
        self._records: Optional[dict[K, R]] = None
        self._lock = threading.RLock()
        self.is_dirty = False
        self._dirty_ids: set[str] = set()

    @property
    def records(self) -> dict[K, R]:
        with self._lock:
            if self._records is None:
                self.__load_data()
            if self._records is None:
                raise ValueError()
            return self._records

    def __load_data(self) -> None:
        records: dict[K, R] = {}
        if self._data_dir is not None and self._data_dir.is_dir():
            try:
                for file_path in sorted(self._data_dir.iterdir()):
                    if file_path.suffix != ".yaml":
                        continue
                    raw_record = load(file_path.read_text(), Loader=Loader)
                    if raw_record is not None:
                        record = self._convert_for_deserialization(raw_record)
                        records[self._key(record)] = record
            except (OSError, YAMLError) as e:
                logger.error("Failed to load records from %s: %s", self._data_dir, e)
                raise StoreError(f"Failed to load records from {self._data_dir}") from e
        self._records = records

    def __save_data(self) -> None:
        if self._data_dir is None:
            self._dirty_ids.clear()
            return

        try:
            self._data_dir.mkdir(parents=True, exist_ok=True)
            for record in self.records.values():
                record_id = self._id(record)
                if record_id in self._dirty_ids:
                    serializable_record = self._convert_for_serialization(
                        deepcopy(record)
                    )
                    file_path = self._data_dir / f"{record_id}.yaml"
                    file_path.write_text(dump(serializable_record, Dumper=Dumper))
        except (OSError, YAMLError) as e:
            logger.error("Failed to write records to %s: %s", self._data_dir, e)
            raise StoreError(f"Failed to write records to {self._data_dir}") from e

        self._dirty_ids.clear()

    def flush(self) -> bool:
        with self._lock:
            if self._records is not None and self.is_dirty:
                self.__save_data()
                self.is_dirty = False
                return True
            return False

    def _get(self, key: K) -> Optional[R]:
        with self._lock:
            record = self.records.get(key)
            return deepcopy(record)

    def _put(self, record: R) -> R:
        """Store `record` under its key, replacing any previous version."""
        record = deepcopy(record)
        with self._lock:
            if self._id(record) is None:
                self._set_id(record, generate_entity_id())
            self.records[self._key(record)] = record
            self.is_dirty = True
            self._dirty_ids.add(self._id(record))
            return deepcopy(record)

    def _select(self, predicate: Callable[[R], bool]) -> list[R]:
        with self._lock:
            return deepcopy(
                [record for record in self.records.values() if predicate(record)]
            )

    def _id(self, record: R) -> Any:
        return record["id"]  # type: ignore[index]

    def _set_id(self, record: R, record_id: str) -> None:
        record["id"] = record_id  # type: ignore[index]

    def _key(self, record: R) -> K:
        raise NotImplementedError

    def _convert_for_serialization(self, record: R) -> dict[str, Any]:
        raise NotImplementedError

    def _convert_for_deserialization(self, record: dict[str, Any]) -> R:
        raise NotImplementedError

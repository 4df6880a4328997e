from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from .errors import (
    AlreadyInitializedError,
    CodeNotFoundError,
    NotInitializedError,
    NotReadyError,
    PartitionNotFoundError,
)
from .models import (
    DEFAULT_MAX_CODE_LENGTH,
    DEFAULT_MAX_NAME_LENGTH,
    DEFAULT_MAX_VALUE_LENGTH,
    StoreConfig,
)
from .partition import Partition


logger = logging.getLogger(__name__)

Capacity = Union[int, Mapping[str, int]]


def _resolve_capacities(names: Sequence[str], capacity: Capacity) -> List[int]:
    if isinstance(capacity, bool):
        raise ValueError("capacity must be an int or a mapping of name -> int")
    if isinstance(capacity, int):
        return [capacity for _ in names]
    missing = [name for name in names if name not in capacity]
    if missing:
        raise ValueError(f"Missing capacity for directories: {', '.join(missing)}")
    unknown = [name for name in capacity if name not in names]
    if unknown:
        raise ValueError(f"Capacity given for unknown directories: {', '.join(unknown)}")
    return [capacity[name] for name in names]


class PartitionStore:
    """
    Fixed set of named directories with a single initialize/teardown lifecycle.

    Lifecycle
    - A new store is uninitialized. `initialize()` allocates one empty
      directory per configured name and makes the store ready.
    - Every entry/lookup operation raises `NotReadyError` unless ready.
    - `teardown()` drops all entries and returns the store to uninitialized;
      it may then be initialized again.

    Operations resolve the directory by exact, case-sensitive name and
    delegate to its `Partition`. Failed operations change nothing.

    Not thread-safe: callers sharing a store across threads must serialize
    access themselves.
    """

    def __init__(self) -> None:
        self._partitions: Optional[List[Partition]] = None

    # -------- Lifecycle --------
    @property
    def is_ready(self) -> bool:
        return self._partitions is not None

    def initialize(
        self,
        partition_names: Sequence[str],
        capacity_per_partition: Capacity,
        *,
        max_code_length: int = DEFAULT_MAX_CODE_LENGTH,
        max_value_length: int = DEFAULT_MAX_VALUE_LENGTH,
        max_name_length: int = DEFAULT_MAX_NAME_LENGTH,
    ) -> None:
        """Allocate one empty directory per name, in the given order.

        `capacity_per_partition` is either one capacity for every directory or
        a mapping giving each directory its own.

        Raises:
        - AlreadyInitializedError if the store is already ready.
        - ValueError for a bare string instead of a name sequence, for empty,
          blank, non-string, duplicate or over-long names, or capacities < 1;
          the store then stays uninitialized.
        """
        if self._partitions is not None:
            raise AlreadyInitializedError("Store already initialized; call teardown() first")

        if isinstance(partition_names, str):
            raise ValueError("partition_names must be a sequence of names, not a single string")
        names = list(partition_names)
        if not names:
            raise ValueError("at least one directory name is required")
        seen: set[str] = set()
        for name in names:
            if not isinstance(name, str):
                raise ValueError(f"directory names must be strings, got {name!r}")
            if not name.strip():
                raise ValueError("directory names must not be blank")
            if len(name) > max_name_length:
                raise ValueError(
                    f"directory name {name!r} exceeds {max_name_length} characters"
                )
            if name in seen:
                raise ValueError(f"duplicate directory name: {name!r}")
            seen.add(name)

        capacities = _resolve_capacities(names, capacity_per_partition)
        # Build everything first so a bad capacity leaves the store untouched
        partitions = [
            Partition(
                name,
                cap,
                max_code_length=max_code_length,
                max_value_length=max_value_length,
            )
            for name, cap in zip(names, capacities)
        ]
        self._partitions = partitions
        logger.info(
            "Initialized store with %d directories (total capacity %d)",
            len(partitions),
            sum(capacities),
        )

    def initialize_from_config(self, config: StoreConfig) -> None:
        self.initialize(
            config.directory_names,
            config.capacity_per_directory,
            max_code_length=config.max_code_length,
            max_value_length=config.max_value_length,
            max_name_length=config.max_name_length,
        )

    def teardown(self) -> None:
        """Release every directory's entries; raises NotInitializedError if not ready."""
        if self._partitions is None:
            raise NotInitializedError("Store not initialized or already torn down")
        for partition in self._partitions:
            partition.clear()
        self._partitions = None
        logger.info("Store torn down")

    @classmethod
    @contextmanager
    def open(cls, config: Optional[StoreConfig] = None) -> Iterator["PartitionStore"]:
        """Yield a ready store built from `config` (defaults if None); tear it down on exit."""
        store = cls()
        store.initialize_from_config(config or StoreConfig())
        try:
            yield store
        finally:
            if store.is_ready:
                store.teardown()

    # -------- Lookup --------
    def _require_ready(self) -> List[Partition]:
        if self._partitions is None:
            raise NotReadyError("Store not initialized; call initialize() first")
        return self._partitions

    def find_partition(self, name: str) -> Optional[Partition]:
        for partition in self._require_ready():
            if partition.name == name:
                return partition
        return None

    def _resolve(self, name: str) -> Partition:
        partition = self.find_partition(name)
        if partition is None:
            logger.debug("Directory %r does not exist", name)
            raise PartitionNotFoundError(name)
        return partition

    @property
    def total_capacity(self) -> int:
        return sum(p.capacity for p in self._require_ready())

    def list_partition_names(self) -> List[str]:
        return [p.name for p in self._require_ready()]

    # -------- Entry operations --------
    def add_entry(self, partition_name: str, code: str, value: str) -> None:
        """Add `code -> value` to the named directory.

        Raises NotReadyError, PartitionNotFoundError, CodeTooLongError,
        ValueTooLongError, PartitionFullError or DuplicateCodeError.
        """
        self._resolve(partition_name).add(code, value)

    def get_entry(self, partition_name: str, code: str) -> str:
        """Return the number stored under `code`.

        Raises NotReadyError, PartitionNotFoundError or CodeNotFoundError.
        """
        partition = self._resolve(partition_name)
        value = partition.get(code)
        if value is None:
            raise CodeNotFoundError(partition_name, code)
        return value

    def remove_entry(self, partition_name: str, code: str) -> None:
        self._resolve(partition_name).remove(code)

    def list_entries(self, partition_name: str) -> List[Tuple[str, str]]:
        return self._resolve(partition_name).list()

    def partition_usage(self, partition_name: str) -> Tuple[int, int]:
        """Return `(count, capacity)` for the named directory."""
        partition = self._resolve(partition_name)
        return (partition.count, partition.capacity)


__all__ = [
    "PartitionStore",
]

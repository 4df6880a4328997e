from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .errors import (
    CodeNotFoundError,
    CodeTooLongError,
    DuplicateCodeError,
    NotReadyError,
    PartitionFullError,
    ValueTooLongError,
)
from .models import DEFAULT_MAX_CODE_LENGTH, DEFAULT_MAX_VALUE_LENGTH, Entry


logger = logging.getLogger(__name__)


class Partition:
    """
    A named, capacity-bounded directory of speed-dial entries.

    - Entries keep insertion order; `list()` exposes that order.
    - Codes are unique within the directory.
    - Adding checks length limits, then capacity, then duplicates; a rejected
      call leaves the entries untouched.
    - Removal shifts later entries one slot left, so survivors keep their
      relative order.

    All scans are linear: capacity is small and fixed by configuration.

    Once released by `clear()` (store teardown) every entry operation raises
    NotReadyError, so handles kept across a teardown cannot reach the data.
    """

    def __init__(
        self,
        name: str,
        capacity: int,
        *,
        max_code_length: int = DEFAULT_MAX_CODE_LENGTH,
        max_value_length: int = DEFAULT_MAX_VALUE_LENGTH,
    ) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be > 0")
        if max_code_length <= 0 or max_value_length <= 0:
            raise ValueError("length limits must be > 0")
        self._name = name
        self._capacity = capacity
        self._max_code_length = max_code_length
        self._max_value_length = max_value_length
        self._entries: List[Entry] = []
        self._released = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def count(self) -> int:
        return len(self._entries)

    @property
    def is_full(self) -> bool:
        return len(self._entries) >= self._capacity

    @property
    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and self._index_of(code) is not None

    def __repr__(self) -> str:
        return f"Partition(name={self._name!r}, count={self.count}, capacity={self._capacity})"

    def _check_live(self) -> None:
        if self._released:
            raise NotReadyError(f"Directory '{self._name}' was released by store teardown")

    def _index_of(self, code: str) -> Optional[int]:
        for i, entry in enumerate(self._entries):
            if entry.code == code:
                return i
        return None

    # -------- Core operations --------
    def add(self, code: str, value: str) -> None:
        """Append `code -> value`.

        Raises (in check order):
        - CodeTooLongError / ValueTooLongError if input exceeds the limits.
        - PartitionFullError if the directory holds `capacity` entries.
        - DuplicateCodeError if `code` is already present.
        """
        self._check_live()
        if len(code) > self._max_code_length:
            raise CodeTooLongError(code, self._max_code_length)
        if len(value) > self._max_value_length:
            raise ValueTooLongError(value, self._max_value_length)
        # Capacity is checked before the duplicate scan
        if self.is_full:
            raise PartitionFullError(self._name, self._capacity)
        if self._index_of(code) is not None:
            raise DuplicateCodeError(self._name, code)

        self._entries.append(Entry(code=code, value=value))
        logger.debug("Added %r -> %r to %r", code, value, self._name)

    def get(self, code: str) -> Optional[str]:
        self._check_live()
        idx = self._index_of(code)
        if idx is None:
            return None
        return self._entries[idx].value

    def remove(self, code: str) -> None:
        """Remove `code`; raises CodeNotFoundError (with no change) if absent."""
        self._check_live()
        idx = self._index_of(code)
        if idx is None:
            raise CodeNotFoundError(self._name, code)
        # list.pop shifts every later entry one slot left
        removed = self._entries.pop(idx)
        logger.debug("Removed %r -> %r from %r", removed.code, removed.value, self._name)

    def list(self) -> List[Tuple[str, str]]:
        """Snapshot of `(code, value)` pairs in insertion order."""
        self._check_live()
        return [entry.as_pair() for entry in self._entries]

    def clear(self) -> None:
        """Drop all entries and mark the directory released."""
        self._entries = []
        self._released = True


__all__ = [
    "Partition",
]

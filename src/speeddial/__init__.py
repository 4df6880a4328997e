"""
In-memory speed-dial directories.

A `PartitionStore` owns a fixed set of named directories; each `Partition`
holds a capacity-bounded, insertion-ordered list of code -> number entries.
"""

from .dialer import dial
from .errors import (
    AlreadyInitializedError,
    CodeNotFoundError,
    CodeTooLongError,
    DuplicateCodeError,
    InputTooLongError,
    LifecycleError,
    NotInitializedError,
    NotReadyError,
    PartitionFullError,
    PartitionNotFoundError,
    SpeedDialError,
    ValueTooLongError,
)
from .models import Entry, StoreConfig
from .partition import Partition
from .store import PartitionStore

__all__ = [
    "PartitionStore",
    "Partition",
    "Entry",
    "StoreConfig",
    "dial",
    "SpeedDialError",
    "LifecycleError",
    "NotInitializedError",
    "NotReadyError",
    "AlreadyInitializedError",
    "PartitionNotFoundError",
    "PartitionFullError",
    "DuplicateCodeError",
    "CodeNotFoundError",
    "InputTooLongError",
    "CodeTooLongError",
    "ValueTooLongError",
]

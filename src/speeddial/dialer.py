from __future__ import annotations

import logging
from typing import Callable, TypeVar

from .store import PartitionStore


logger = logging.getLogger(__name__)

T = TypeVar("T")


def dial(
    store: PartitionStore,
    partition_name: str,
    code: str,
    dialer: Callable[[str], T],
) -> T:
    """Look up `code` in the named directory and hand the number to `dialer`.

    The store only resolves the number; placing the call is the dialer's job.
    Lookup errors (NotReadyError, PartitionNotFoundError, CodeNotFoundError)
    propagate and the dialer is not invoked.
    """
    number = store.get_entry(partition_name, code)
    logger.debug("Dialing %r via speed dial code %r in %r", number, code, partition_name)
    return dialer(number)


__all__ = [
    "dial",
]

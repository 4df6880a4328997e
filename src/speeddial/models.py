from __future__ import annotations

import os
from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from common.parsing import parse_int, parse_name_list


# Defaults follow the fixed-size layout of the handset: 5 directories sharing
# 1000 numbers, with the usable length of its code/number/name buffers.
DEFAULT_DIRECTORY_COUNT = 5
DEFAULT_TOTAL_NUMBERS = 1000
DEFAULT_MAX_CODE_LENGTH = 49
DEFAULT_MAX_VALUE_LENGTH = 19
DEFAULT_MAX_NAME_LENGTH = 49

# Environment variable names for convenience configuration
ENV_DIRECTORIES = "SPEEDDIAL_DIRECTORIES"
ENV_CAPACITY = "SPEEDDIAL_CAPACITY"
ENV_TOTAL_NUMBERS = "SPEEDDIAL_TOTAL_NUMBERS"
ENV_MAX_CODE_LENGTH = "SPEEDDIAL_MAX_CODE_LENGTH"
ENV_MAX_VALUE_LENGTH = "SPEEDDIAL_MAX_VALUE_LENGTH"


def default_directory_names(count: int = DEFAULT_DIRECTORY_COUNT) -> List[str]:
    return [f"Directory {i + 1}" for i in range(count)]


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    val = os.environ.get(name)
    return val if val not in (None, "") else default


class Entry(BaseModel):
    """A single speed-dial entry: a code unique within its directory and the number it dials."""

    model_config = ConfigDict(frozen=True)

    code: str
    value: str

    def as_pair(self) -> tuple[str, str]:
        return (self.code, self.value)


class StoreConfig(BaseModel):
    """
    Startup configuration for a `PartitionStore`.

    Fields
    - directory_names: names of the fixed directories, in listing order.
    - capacity_per_directory: maximum entries held by each directory.
    - max_code_length / max_value_length: longest accepted code / number;
      longer input is rejected, never truncated.
    - max_name_length: longest accepted directory name.

    Notes
    - Defaults reproduce the classic layout: "Directory 1".."Directory 5",
      1000 numbers split evenly (200 per directory).
    - Invalid values raise `pydantic.ValidationError` (a `ValueError`).
    """

    directory_names: List[str] = Field(
        default_factory=default_directory_names,
        description="Directory names in configuration order",
    )
    capacity_per_directory: int = Field(
        default=DEFAULT_TOTAL_NUMBERS // DEFAULT_DIRECTORY_COUNT,
        ge=1,
        description="Maximum entries per directory",
    )
    max_code_length: int = Field(default=DEFAULT_MAX_CODE_LENGTH, ge=1)
    max_value_length: int = Field(default=DEFAULT_MAX_VALUE_LENGTH, ge=1)
    max_name_length: int = Field(default=DEFAULT_MAX_NAME_LENGTH, ge=1)

    @field_validator("directory_names")
    @classmethod
    def _check_names(cls, names: List[str]) -> List[str]:
        if not names:
            raise ValueError("at least one directory name is required")
        seen: set[str] = set()
        for name in names:
            if not name.strip():
                raise ValueError("directory names must not be blank")
            if name in seen:
                raise ValueError(f"duplicate directory name: {name!r}")
            seen.add(name)
        return names

    @model_validator(mode="after")
    def _check_name_lengths(self) -> "StoreConfig":
        for name in self.directory_names:
            if len(name) > self.max_name_length:
                raise ValueError(
                    f"directory name {name!r} exceeds {self.max_name_length} characters"
                )
        return self

    @property
    def total_capacity(self) -> int:
        return self.capacity_per_directory * len(self.directory_names)

    def capacities(self) -> Dict[str, int]:
        return {name: self.capacity_per_directory for name in self.directory_names}

    # -------- Construction helpers --------
    @classmethod
    def from_total(
        cls,
        directory_names: Sequence[str],
        total_numbers: int,
        **kwargs: int,
    ) -> "StoreConfig":
        """Split `total_numbers` evenly across the directories (remainder is unused)."""
        names = list(directory_names)
        if not names:
            raise ValueError("at least one directory name is required")
        per_directory = total_numbers // len(names)
        if per_directory < 1:
            raise ValueError(
                f"total_numbers={total_numbers} is too small for {len(names)} directories"
            )
        return cls(directory_names=names, capacity_per_directory=per_directory, **kwargs)

    @classmethod
    def from_env(cls) -> "StoreConfig":
        """Build a config from SPEEDDIAL_* environment variables, falling back to defaults.

        `SPEEDDIAL_CAPACITY` (per directory) takes precedence over
        `SPEEDDIAL_TOTAL_NUMBERS` (split evenly) when both are set.
        """
        raw_names = _getenv(ENV_DIRECTORIES)
        if raw_names is None:
            names = default_directory_names()
        else:
            names = parse_name_list(raw_names)
            if not names:
                raise ValueError(f"{ENV_DIRECTORIES} is set but lists no directory names")
        capacity = parse_int(_getenv(ENV_CAPACITY), ENV_CAPACITY)
        total = parse_int(_getenv(ENV_TOTAL_NUMBERS), ENV_TOTAL_NUMBERS)

        limits: Dict[str, int] = {}
        max_code = parse_int(_getenv(ENV_MAX_CODE_LENGTH), ENV_MAX_CODE_LENGTH)
        if max_code is not None:
            limits["max_code_length"] = max_code
        max_value = parse_int(_getenv(ENV_MAX_VALUE_LENGTH), ENV_MAX_VALUE_LENGTH)
        if max_value is not None:
            limits["max_value_length"] = max_value

        if capacity is not None:
            return cls(directory_names=names, capacity_per_directory=capacity, **limits)
        return cls.from_total(
            names, total if total is not None else DEFAULT_TOTAL_NUMBERS, **limits
        )


__all__ = [
    "Entry",
    "StoreConfig",
    "default_directory_names",
    "DEFAULT_DIRECTORY_COUNT",
    "DEFAULT_TOTAL_NUMBERS",
    "DEFAULT_MAX_CODE_LENGTH",
    "DEFAULT_MAX_VALUE_LENGTH",
    "DEFAULT_MAX_NAME_LENGTH",
]

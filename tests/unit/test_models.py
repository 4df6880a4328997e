from __future__ import annotations

import pytest

from speeddial.models import Entry, StoreConfig


_ENV_VARS = (
    "SPEEDDIAL_DIRECTORIES",
    "SPEEDDIAL_CAPACITY",
    "SPEEDDIAL_TOTAL_NUMBERS",
    "SPEEDDIAL_MAX_CODE_LENGTH",
    "SPEEDDIAL_MAX_VALUE_LENGTH",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults_split_1000_numbers_over_5_directories():
    cfg = StoreConfig()
    assert cfg.directory_names == [
        "Directory 1",
        "Directory 2",
        "Directory 3",
        "Directory 4",
        "Directory 5",
    ]
    assert cfg.capacity_per_directory == 200
    assert cfg.total_capacity == 1000
    assert cfg.max_code_length == 49
    assert cfg.max_value_length == 19


def test_from_total_divides_evenly_dropping_remainder():
    cfg = StoreConfig.from_total(["A", "B", "C"], 10)
    assert cfg.capacity_per_directory == 3
    assert cfg.capacities() == {"A": 3, "B": 3, "C": 3}


def test_from_total_too_small_raises():
    with pytest.raises(ValueError):
        StoreConfig.from_total(["A", "B", "C"], 2)


def test_rejects_duplicate_blank_and_empty_names():
    with pytest.raises(ValueError):
        StoreConfig(directory_names=["A", "A"])
    with pytest.raises(ValueError):
        StoreConfig(directory_names=["A", ""])
    with pytest.raises(ValueError):
        StoreConfig(directory_names=[])


def test_rejects_overlong_name_and_bad_capacity():
    with pytest.raises(ValueError):
        StoreConfig(directory_names=["x" * 50])
    with pytest.raises(ValueError):
        StoreConfig(capacity_per_directory=0)


def test_from_env_defaults(clean_env):
    cfg = StoreConfig.from_env()
    assert cfg == StoreConfig()


def test_from_env_reads_names_and_total(clean_env):
    clean_env.setenv("SPEEDDIAL_DIRECTORIES", "Family, Work, Emergency")
    clean_env.setenv("SPEEDDIAL_TOTAL_NUMBERS", "30")
    clean_env.setenv("SPEEDDIAL_MAX_VALUE_LENGTH", "15")
    cfg = StoreConfig.from_env()
    assert cfg.directory_names == ["Family", "Work", "Emergency"]
    assert cfg.capacity_per_directory == 10
    assert cfg.max_value_length == 15


def test_from_env_capacity_wins_over_total(clean_env):
    clean_env.setenv("SPEEDDIAL_DIRECTORIES", '["A", "B"]')
    clean_env.setenv("SPEEDDIAL_TOTAL_NUMBERS", "100")
    clean_env.setenv("SPEEDDIAL_CAPACITY", "7")
    cfg = StoreConfig.from_env()
    assert cfg.capacity_per_directory == 7


def test_from_env_malformed_int_raises(clean_env):
    clean_env.setenv("SPEEDDIAL_CAPACITY", "lots")
    with pytest.raises(ValueError):
        StoreConfig.from_env()


def test_entry_is_immutable():
    e = Entry(code="home", value="111")
    assert e.as_pair() == ("home", "111")
    with pytest.raises(Exception):
        e.value = "222"  # type: ignore[misc]


@pytest.mark.parametrize("raw", ["[]", " , ", '[""]'])
def test_from_env_set_but_empty_directories_raises(clean_env, raw):
    clean_env.setenv("SPEEDDIAL_DIRECTORIES", raw)
    with pytest.raises(ValueError):
        StoreConfig.from_env()

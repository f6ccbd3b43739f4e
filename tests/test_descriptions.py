from types import MappingProxyType

import pytest

from catalog.descriptions import (
    DEPARTMENT_DESCRIPTIONS,
    FALLBACK_DESCRIPTION,
    lookup_description,
    normalize_key,
)

HOUSING = "Oversees departments and boards that regulate various professions, businesses, financial services, and housing."
PARKS = "Manages California's state parks and recreational areas."


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Department\nof Testing", "department of testing"),
        ("First Line\nSecond\n\nThird", "first line second  third"),
        ("simple key", "simple key"),
        ("", ""),
        ("\n\n", "  "),
    ],
)
def test_normalize_key(name, expected):
    assert normalize_key(name) == expected


def test_lookup_exact_match():
    assert lookup_description("Business, Consumer Services and Housing Agency") == HOUSING


def test_lookup_is_case_insensitive_and_handles_newlines():
    assert lookup_description("business, consumer services\nand housing agency") == HOUSING


def test_lookup_parks_special_case():
    assert lookup_description("Parks and Recreation") == PARKS
    assert lookup_description("Department of\nParks and Recreation") == PARKS


def test_lookup_unknown_name_falls_back():
    assert lookup_description("Non Existent Department") == "Description not available."
    assert FALLBACK_DESCRIPTION == "Description not available."


def test_table_is_read_only():
    assert isinstance(DEPARTMENT_DESCRIPTIONS, MappingProxyType)
    with pytest.raises(TypeError):
        DEPARTMENT_DESCRIPTIONS["new key"] = "value"  # type: ignore[index]


def test_table_keys_are_normalized():
    for key in DEPARTMENT_DESCRIPTIONS:
        assert key == normalize_key(key)

"""Tests for the discriminator-field resolver."""

from typing import Literal

import pytest
from pydantic import BaseModel

from versioned_entity.resolver import field_resolver


class Tagged(BaseModel):
    v: Literal[2]


def test_reads_mapping_field():
    assert field_resolver("v")({"v": 3}) == 3


def test_reads_attribute():
    assert field_resolver("v")(Tagged(v=2)) == 2


def test_custom_field_name():
    assert field_resolver("schema_version")({"schema_version": 4, "v": 1}) == 4


def test_default_field_is_v():
    assert field_resolver()({"v": 1}) == 1


@pytest.mark.parametrize(
    "data",
    [{"a": 5}, {"v": "1"}, {"v": None}, {"v": True}, None, 42, "v", [1, 2], object()],
)
def test_indeterminate_for_anything_without_numeric_tag(data):
    assert field_resolver("v")(data) is None


@pytest.mark.parametrize("value", [1.5, 0, -2])
def test_numbers_outside_registry_still_resolve(value):
    assert field_resolver("v")({"v": value}) == value

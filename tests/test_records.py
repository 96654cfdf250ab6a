"""Tests for record serialisation."""

from __future__ import annotations

import dataclasses

import pytest

from reflectdoc.collaborators import SourceMetadata, TypeDescriptor
from reflectdoc.records import CallableRecord, ClassRecord, ParameterRecord, PropertyRecord


def test_false_flags_and_absent_values_are_omitted() -> None:
    record = PropertyRecord(name="id", readonly=False, abstract=False, deprecated=False)

    assert record.as_dict() == {"name": "id"}


def test_false_default_value_is_kept() -> None:
    record = PropertyRecord(name="enabled", default=False, readonly=True)

    assert record.as_dict() == {"name": "enabled", "readonly": True, "default": False}


def test_nested_records_use_wire_names() -> None:
    method = CallableRecord(
        name="fetch",
        params=(ParameterRecord(name="force", optional=True, default="false"),),
        returns=TypeDescriptor(names=("Promise<User>",)),
        returns_description="The user",
        meta=SourceMetadata(file="User.ts", path="src", line=4),
    )
    record = ClassRecord(name="User", methods=(method,), is_non_exported=True)

    assert record.as_dict() == {
        "name": "User",
        "methods": [
            {
                "name": "fetch",
                "params": [{"name": "force", "optional": True, "default": "false"}],
                "returns": {"names": ["Promise<User>"]},
                "returnsDescription": "The user",
                "meta": {"file": "User.ts", "path": "src", "line": 4},
            }
        ],
        "isNonExported": True,
    }


def test_records_are_immutable() -> None:
    record = ClassRecord(name="User")

    with pytest.raises(dataclasses.FrozenInstanceError):
        record.name = "Other"  # type: ignore[misc]


def test_empty_string_description_is_kept() -> None:
    assert CallableRecord(name="x", returns_description="").as_dict() == {
        "name": "x",
        "returnsDescription": "",
    }

"""Tests for the property resolver and the accessor merge."""

from __future__ import annotations

import pytest

from reflectdoc.collaborators import TypeDescriptor
from reflectdoc.resolvers import MissingGetterError, PropertyResolver
from tests._fixtures.reflection_builder import ReflectionBuilder, intrinsic, source


def test_plain_property_fields(builder: ReflectionBuilder) -> None:
    node = builder.prop(
        "token",
        flags={"isStatic": True, "isReadonly": True, "isOptional": True},
        comment=builder.comment(
            "The bot token.",
            tags=[("see", " Client#login "), ("abstract", ""), ("deprecated", "use auth")],
        ),
        sources=source("src/client/Client.ts", 12),
    )

    record = PropertyResolver().resolve(builder.parse(node))

    assert record.name == "token"
    assert record.description == "The bot token."
    assert record.see == ("Client#login",)
    assert record.scope == "static"
    assert record.readonly is True
    assert record.abstract is True
    assert record.deprecated is True
    assert record.type == TypeDescriptor(names=("string",), optional=True)
    assert record.meta is not None and record.meta.file == "Client.ts"


def test_plain_property_private_by_tag_or_flag(builder: ReflectionBuilder) -> None:
    tagged = builder.prop("_a", tags=[("internal", "")])
    flagged = builder.prop("_b", flags={"isPrivate": True})

    assert PropertyResolver().resolve(builder.parse(tagged)).access == "private"
    assert PropertyResolver().resolve(builder.parse(flagged)).access == "private"
    assert PropertyResolver().resolve(builder.parse(builder.prop("c"))).access is None


def test_plain_property_default_precedence(builder: ReflectionBuilder) -> None:
    tagged = builder.prop("limit", "number", defaultValue="50", tags=[("default", "100")])
    recorded = builder.prop("limit", "number", defaultValue="50")
    elided = builder.prop("options", "object", defaultValue="...")

    assert PropertyResolver().resolve(builder.parse(tagged)).default == "100"
    assert PropertyResolver().resolve(builder.parse(recorded)).default == "50"
    assert PropertyResolver().resolve(builder.parse(elided)).default is None


def test_fenced_default_tag_yields_bare_value(builder: ReflectionBuilder) -> None:
    node = builder.prop("limit", "number", defaultValue="50")
    node["comment"] = {
        "summary": [{"kind": "text", "text": "Page size."}],
        "blockTags": [{"tag": "@default", "content": [{"kind": "code", "text": "```ts\n100\n```"}]}],
    }

    record = PropertyResolver().resolve(builder.parse(node))

    assert record.default == "100"
    assert record.description == "Page size."


def test_accessor_without_setter_is_readonly(builder: ReflectionBuilder) -> None:
    node = builder.accessor("uptime", getter=builder.getter("uptime", "number"))

    record = PropertyResolver().resolve(builder.parse(node))

    assert record.readonly is True
    assert record.type == TypeDescriptor(names=("number",))


def test_accessor_readonly_ignores_getter_tags(builder: ReflectionBuilder) -> None:
    getter = builder.getter("ping", "number", tags=[("readonly", "false")], flags={"isReadonly": False})
    node = builder.accessor("ping", getter=getter, flags={"isReadonly": False})

    assert PropertyResolver().resolve(builder.parse(node)).readonly is True


def test_accessor_with_setter_is_writable(builder: ReflectionBuilder) -> None:
    node = builder.accessor(
        "name",
        getter=builder.getter("name"),
        setter=builder.setter("name"),
    )

    assert PropertyResolver().resolve(builder.parse(node)).readonly is False


def test_accessor_readonly_flag_survives_setter(builder: ReflectionBuilder) -> None:
    node = builder.accessor(
        "id",
        getter=builder.getter("id"),
        setter=builder.setter("id"),
        flags={"isReadonly": True},
    )

    assert PropertyResolver().resolve(builder.parse(node)).readonly is True


def test_accessor_documentation_comes_from_getter(builder: ReflectionBuilder) -> None:
    getter = builder.getter(
        "guild",
        "Guild",
        comment=builder.comment("The guild of this channel.", tags=[("see", "Guild")]),
    )
    node = builder.accessor(
        "guild",
        getter=getter,
        type=intrinsic("never"),
        flags={"isPrivate": True},
        comment=builder.comment(
            "Accessor comment",
            tags=[("deprecated", ""), ("abstract", ""), ("internal", ""), ("see", "Other")],
        ),
    )

    record = PropertyResolver().resolve(builder.parse(node))

    assert record.description == "The guild of this channel."
    assert record.see == ("Guild",)
    assert record.deprecated is False
    assert record.abstract is False
    assert record.access is None
    assert record.type == TypeDescriptor(names=("Guild",))


def test_accessor_getter_tags_apply(builder: ReflectionBuilder) -> None:
    getter = builder.getter("old", tags=[("deprecated", ""), ("private", "")])
    node = builder.accessor("old", getter=getter)

    record = PropertyResolver().resolve(builder.parse(node))

    assert record.deprecated is True
    assert record.access == "private"


def test_accessor_keeps_own_scope_and_default(builder: ReflectionBuilder) -> None:
    getter = builder.getter("level", "number", tags=[("default", "1")])
    node = builder.accessor(
        "level",
        getter=getter,
        flags={"isStatic": True},
        tags=[("default", "7")],
    )

    record = PropertyResolver().resolve(builder.parse(node))

    assert record.scope == "static"
    assert record.default == "7"


def test_accessor_default_falls_back_to_getter(builder: ReflectionBuilder) -> None:
    tagged = builder.accessor("level", getter=builder.getter("level", tags=[("default", "1")]))
    recorded = builder.accessor("level", getter=builder.getter("level", defaultValue="2"))

    assert PropertyResolver().resolve(builder.parse(tagged)).default == "1"
    assert PropertyResolver().resolve(builder.parse(recorded)).default == "2"


def test_accessor_ignores_elided_getter_default(builder: ReflectionBuilder) -> None:
    node = builder.accessor("level", getter=builder.getter("level", defaultValue="..."))

    assert PropertyResolver().resolve(builder.parse(node)).default is None


def test_accessor_elided_default_falls_through_to_getter(builder: ReflectionBuilder) -> None:
    tagged = builder.accessor(
        "level",
        getter=builder.getter("level", tags=[("default", "4")]),
        defaultValue="...",
    )
    recorded = builder.accessor(
        "level",
        getter=builder.getter("level", defaultValue="9"),
        defaultValue="...",
    )

    assert PropertyResolver().resolve(builder.parse(tagged)).default == "4"
    assert PropertyResolver().resolve(builder.parse(recorded)).default == "9"


def test_accessor_without_getter_raises(builder: ReflectionBuilder) -> None:
    node = builder.accessor("secret", setter=builder.setter("secret"))

    with pytest.raises(MissingGetterError) as excinfo:
        PropertyResolver().resolve(builder.parse(node))

    assert excinfo.value.name == "secret"

"""Tests for KnownTypeBuilder."""

import pytest

from swiftrewriter.ir import (
    INT,
    STRING,
    VOID,
    FunctionSignature,
    Ownership,
    ParameterSignature,
    ValueStorage,
)
from swiftrewriter.known_type import (
    HasMethods,
    HasProperties,
    KnownPropertyAccessor,
    KnownType,
    KnownTypeBuilder,
    KnownTypeKind,
    KnownTypeReference,
)


def test_builder_is_fluent():
    typ = (
        KnownTypeBuilder("Foo", supertype="NSObject")
        .constructor()
        .method("bar", [("x", INT)], STRING)
        .property("name", STRING)
        .field("count", INT)
        .protocol_conformance("NSCopying")
        .build()
    )
    assert typ.type_name == "Foo"
    assert typ.kind == KnownTypeKind.CLASS
    assert typ.supertype == KnownTypeReference.named("NSObject")
    assert len(typ.known_constructors) == 1
    assert typ.known_methods[0].signature == FunctionSignature(
        "bar", (ParameterSignature("x", "x", INT),), STRING
    )
    assert typ.known_properties[0].name == "name"
    assert typ.known_fields[0].name == "count"
    assert typ.known_protocol_conformances[0].protocol_name == "NSCopying"


def test_built_type_satisfies_capabilities():
    typ = KnownTypeBuilder("Foo").build()
    assert isinstance(typ, KnownType)
    assert isinstance(typ, HasMethods)
    assert isinstance(typ, HasProperties)


def test_duplicate_empty_constructor_asserts():
    builder = KnownTypeBuilder("Foo").constructor()
    with pytest.raises(AssertionError):
        builder.constructor()


def test_constructor_with_parameters_after_empty_one():
    typ = KnownTypeBuilder("Foo").constructor().constructor_short([("x", INT)]).build()
    assert [len(c.parameters) for c in typ.known_constructors] == [0, 1]


def test_selector_matching_dedup_first_wins():
    typ = (
        KnownTypeBuilder("Foo")
        .method("bar", [("x", INT)], VOID)
        .method("bar", [("x", STRING)], INT)
        .build()
    )
    assert len(typ.known_methods) == 1
    assert typ.known_methods[0].signature.return_type == VOID


def test_swift_matching_keeps_type_overloads():
    typ = (
        KnownTypeBuilder("Foo")
        .method("bar", [("x", INT)], use_swift_signature_matching=True)
        .method("bar", [("x", STRING)], use_swift_signature_matching=True)
        .method("bar", [("x", STRING)], INT, use_swift_signature_matching=True)
        .build()
    )
    assert [m.signature.parameters[0].type for m in typ.known_methods] == [INT, STRING]


def test_property_dedup_on_name_storage_and_staticness():
    typ = (
        KnownTypeBuilder("Foo")
        .property("a", INT)
        .property("a", INT, accessor=KnownPropertyAccessor.GETTER)
        .property("a", INT, is_static=True)
        .property("a", INT, ownership=Ownership.WEAK)
        .build()
    )
    assert len(typ.known_properties) == 3
    assert typ.known_properties[0].accessor == KnownPropertyAccessor.GETTER_AND_SETTER


def test_field_dedup():
    typ = (
        KnownTypeBuilder("Foo")
        .field("a", INT)
        .field_storage("a", ValueStorage(INT))
        .field("a", INT, is_constant=True)
        .build()
    )
    assert len(typ.known_fields) == 2
    assert typ.known_fields[1].storage.is_constant


def test_conformance_dedup():
    typ = KnownTypeBuilder("Foo").protocol_conformance("P").protocol_conformance("P").build()
    assert len(typ.known_protocol_conformances) == 1


def test_builder_usable_after_build():
    builder = KnownTypeBuilder("Foo").method("a")
    first = builder.build()
    builder.method("b")
    assert [m.signature.name for m in builder.build().known_methods] == ["a", "b"]
    assert first.type_name == "Foo"


def test_built_type_is_not_changed_by_later_mutations():
    builder = KnownTypeBuilder("Foo").method("a").property("p", INT)
    first = builder.build()
    builder.method("b").property("q", STRING).with_supertype("NSObject")
    assert [m.signature.name for m in first.known_methods] == ["a"]
    assert [p.name for p in first.known_properties] == ["p"]
    assert first.supertype is None
    assert first.known_methods[0].owner_type is first


def test_with_kind():
    typ = KnownTypeBuilder("P", kind=KnownTypeKind.CLASS).with_kind(KnownTypeKind.PROTOCOL).build()
    assert typ.kind == KnownTypeKind.PROTOCOL
    assert typ.origin

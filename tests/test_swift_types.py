"""Tests for the value and signature model."""

from swiftrewriter.ir import (
    INT,
    STRING,
    VOID,
    BlockType,
    BlockTypeAttribute,
    FunctionSignature,
    ImplicitlyUnwrappedOptionalType,
    MetatypeType,
    NullabilityUnspecifiedType,
    OptionalType,
    Ownership,
    ParameterSignature,
    ProtocolCompositionType,
    TupleType,
    TypeName,
    ValueStorage,
    deep_unwrapped,
    unwrapped,
)


def test_structural_equality():
    assert OptionalType(TypeName("Int")) == OptionalType(INT)
    assert hash(OptionalType(INT)) == hash(OptionalType(TypeName("Int")))
    assert OptionalType(INT) != ImplicitlyUnwrappedOptionalType(INT)


def test_deep_unwrap_strips_every_layer():
    assert deep_unwrapped(OptionalType(OptionalType(INT))) == INT
    assert deep_unwrapped(ImplicitlyUnwrappedOptionalType(INT)) == INT
    assert deep_unwrapped(NullabilityUnspecifiedType(OptionalType(INT))) == INT
    assert deep_unwrapped(INT) == INT


def test_unwrap_strips_one_layer():
    assert unwrapped(OptionalType(OptionalType(INT))) == OptionalType(INT)


def test_rendering():
    assert str(VOID) == "Void"
    assert str(TupleType((INT, STRING))) == "(Int, String)"
    assert str(NullabilityUnspecifiedType(TypeName("NSString"))) == "NSString!"
    assert str(MetatypeType(TypeName("NSObject"))) == "NSObject.Type"
    block = BlockType(VOID, (INT,), frozenset({BlockTypeAttribute.ESCAPING}))
    assert str(block) == "@escaping (Int) -> Void"
    assert str(OptionalType(block)) == "(@escaping (Int) -> Void)?"
    composition = ProtocolCompositionType((TypeName("A"), TypeName("B")))
    assert str(OptionalType(composition)) == "(A & B)?"


def test_block_attributes_union():
    block = BlockType(VOID, (), frozenset({BlockTypeAttribute.ESCAPING}))
    merged = block.with_attributes(
        frozenset({BlockTypeAttribute.ESCAPING, BlockTypeAttribute.CONVENTION_C})
    )
    assert merged.attributes == frozenset(
        {BlockTypeAttribute.ESCAPING, BlockTypeAttribute.CONVENTION_C}
    )


def test_storage_equality_uses_all_fields():
    assert ValueStorage(INT) == ValueStorage(INT, Ownership.STRONG, False)
    assert ValueStorage(INT) != ValueStorage(INT, Ownership.WEAK)
    assert ValueStorage(INT) != ValueStorage(INT, is_constant=True)
    assert ValueStorage(INT).with_type(STRING) == ValueStorage(STRING)


def test_selector_matching_ignores_types():
    a = FunctionSignature("setValue", (ParameterSignature(None, "v", INT),))
    b = FunctionSignature("setValue", (ParameterSignature(None, "other", STRING),), INT)
    assert a.matches_as_selector(b)
    c = FunctionSignature("setValue", (ParameterSignature("value", "v", INT),))
    assert not a.matches_as_selector(c)


def test_selector_matching_respects_staticness():
    a = FunctionSignature("make")
    b = FunctionSignature("make", is_static=True)
    assert not a.matches_as_selector(b)


def test_swift_matching_compares_parameter_types():
    a = FunctionSignature("f", (ParameterSignature.named("x", INT),))
    b = FunctionSignature("f", (ParameterSignature.named("x", STRING),))
    assert a.matches_as_selector(b)
    assert not a.matches_as_swift_function(b)
    assert a.matches_as_swift_function(a.with_return_type(STRING))


def test_swift_closure_type():
    sig = FunctionSignature("f", (ParameterSignature.named("x", INT),), STRING)
    assert sig.swift_closure_type == BlockType(STRING, (INT,))


def test_signature_copies():
    sig = FunctionSignature("f")
    renamed = sig.with_name("g")
    assert renamed.name == "g"
    assert sig.name == "f"
    assert sig.with_parameters([ParameterSignature.named("x", INT)]).parameters == (
        ParameterSignature("x", "x", INT),
    )

"""Known types: structural descriptions of a type's shape.

Intentions describe the types being generated; synthesized types built with
`KnownTypeBuilder` describe default/library types and serve as test doubles.
Both satisfy the same capability protocols, so passes and the formatter never
need to know which one they are looking at.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, runtime_checkable

from .ir import (
    VOID,
    FunctionSignature,
    Ownership,
    ParameterSignature,
    SwiftType,
    ValueStorage,
)


class KnownTypeKind(Enum):
    CLASS = "class"
    STRUCT = "struct"
    PROTOCOL = "protocol"
    ENUM = "enum"


class KnownPropertyAccessor(Enum):
    GETTER = "getter"
    GETTER_AND_SETTER = "getterAndSetter"


@dataclass(frozen=True)
class KnownTypeReference:
    """Reference to a type by name, used for supertypes."""

    type_name: str

    @classmethod
    def named(cls, type_name: str) -> KnownTypeReference:
        return cls(type_name)

    @property
    def as_type_name(self) -> str:
        return self.type_name


# ============================================================
# CAPABILITIES
# ============================================================


@runtime_checkable
class KnownConstructor(Protocol):
    @property
    def parameters(self) -> list[ParameterSignature]: ...


@runtime_checkable
class KnownMethod(Protocol):
    @property
    def signature(self) -> FunctionSignature: ...

    @property
    def optional(self) -> bool: ...


@runtime_checkable
class KnownProperty(Protocol):
    @property
    def name(self) -> str: ...

    @property
    def storage(self) -> ValueStorage: ...

    @property
    def is_static(self) -> bool: ...

    @property
    def optional(self) -> bool: ...

    @property
    def accessor(self) -> KnownPropertyAccessor: ...


@runtime_checkable
class KnownProtocolConformance(Protocol):
    @property
    def protocol_name(self) -> str: ...


@runtime_checkable
class HasProperties(Protocol):
    @property
    def known_properties(self) -> list[KnownProperty]: ...

    @property
    def known_fields(self) -> list[KnownProperty]: ...


@runtime_checkable
class HasMethods(Protocol):
    @property
    def known_constructors(self) -> list[KnownConstructor]: ...

    @property
    def known_methods(self) -> list[KnownMethod]: ...


@runtime_checkable
class HasConformances(Protocol):
    @property
    def known_protocol_conformances(self) -> list[KnownProtocolConformance]: ...


@runtime_checkable
class KnownType(HasProperties, HasMethods, HasConformances, Protocol):
    """A type's full shape.

    Member sequences are in insertion order, which is also rendering order.
    """

    @property
    def type_name(self) -> str: ...

    @property
    def kind(self) -> KnownTypeKind: ...

    @property
    def supertype(self) -> KnownTypeReference | None: ...

    @property
    def origin(self) -> str: ...


# ============================================================
# SYNTHESIZED TYPES
# ============================================================


@dataclass
class _SynthesizedType:
    type_name: str
    supertype: KnownTypeReference | None = None
    kind: KnownTypeKind = KnownTypeKind.CLASS
    origin: str = "Synthesized type"
    known_constructors: list[KnownConstructor] = field(default_factory=list)
    known_methods: list[KnownMethod] = field(default_factory=list)
    known_properties: list[KnownProperty] = field(default_factory=list)
    known_fields: list[KnownProperty] = field(default_factory=list)
    known_protocol_conformances: list[KnownProtocolConformance] = field(default_factory=list)


@dataclass
class _SynthesizedConstructor:
    parameters: list[ParameterSignature]


@dataclass
class _SynthesizedMethod:
    owner_type: KnownType | None
    signature: FunctionSignature
    optional: bool = False

    @property
    def name(self) -> str:
        return self.signature.name

    @property
    def is_static(self) -> bool:
        return self.signature.is_static


@dataclass
class _SynthesizedProperty:
    owner_type: KnownType | None
    name: str
    storage: ValueStorage
    is_static: bool = False
    optional: bool = False
    accessor: KnownPropertyAccessor = KnownPropertyAccessor.GETTER_AND_SETTER


@dataclass
class _SynthesizedConformance:
    protocol_name: str


ParameterTuple = tuple[str, SwiftType]


def _short_parameters(short_params: list[ParameterTuple] | tuple[ParameterTuple, ...]) -> list[ParameterSignature]:
    return [ParameterSignature.named(label, typ) for label, typ in short_params]


class KnownTypeBuilder:
    """Fluent builder for synthesized known types.

    Used to describe default library types and to build test doubles. Every
    mutator returns the builder. Members are de-duplicated structurally and
    the first registration wins.
    """

    def __init__(
        self,
        type_name: str,
        supertype: KnownTypeReference | str | None = None,
        kind: KnownTypeKind = KnownTypeKind.CLASS,
    ) -> None:
        self._type = _SynthesizedType(type_name)
        self._type.kind = kind
        self._type.origin = "Synthesized with KnownTypeBuilder"
        self.with_supertype(supertype)

    def with_supertype(self, supertype: KnownTypeReference | str | None) -> KnownTypeBuilder:
        if isinstance(supertype, str):
            supertype = KnownTypeReference.named(supertype)
        self._type.supertype = supertype
        return self

    def with_kind(self, kind: KnownTypeKind) -> KnownTypeBuilder:
        self._type.kind = kind
        return self

    # ── constructors ─────────────────────────────────────────

    def constructor(self, parameters: list[ParameterSignature] | None = None) -> KnownTypeBuilder:
        """Add a constructor; with no parameters, adds the empty constructor."""
        params = list(parameters) if parameters is not None else []
        if len(params) == 0:
            assert not any(
                len(c.parameters) == 0 for c in self._type.known_constructors
            ), "An empty constructor is already provided"
        self._type.known_constructors.append(_SynthesizedConstructor(params))
        return self

    def constructor_short(self, short_params: list[ParameterTuple]) -> KnownTypeBuilder:
        return self.constructor(_short_parameters(short_params))

    # ── methods ──────────────────────────────────────────────

    def method(
        self,
        name: str,
        short_params: list[ParameterTuple] | tuple[ParameterTuple, ...] = (),
        returning: SwiftType = VOID,
        *,
        is_static: bool = False,
        optional: bool = False,
        use_swift_signature_matching: bool = False,
    ) -> KnownTypeBuilder:
        signature = FunctionSignature(
            name, tuple(_short_parameters(short_params)), returning, is_static=is_static
        )
        return self.method_signature(
            signature,
            optional=optional,
            use_swift_signature_matching=use_swift_signature_matching,
        )

    def method_signature(
        self,
        signature: FunctionSignature,
        *,
        optional: bool = False,
        use_swift_signature_matching: bool = False,
    ) -> KnownTypeBuilder:
        """Add a method unless one already matches under the chosen mode."""
        for existing in self._type.known_methods:
            if use_swift_signature_matching:
                if existing.signature.matches_as_swift_function(signature):
                    return self
            elif existing.signature.matches_as_selector(signature):
                return self
        self._type.known_methods.append(_SynthesizedMethod(self._type, signature, optional))
        return self

    # ── properties and fields ────────────────────────────────

    def property(
        self,
        name: str,
        typ: SwiftType,
        *,
        ownership: Ownership = Ownership.STRONG,
        is_static: bool = False,
        optional: bool = False,
        accessor: KnownPropertyAccessor = KnownPropertyAccessor.GETTER_AND_SETTER,
    ) -> KnownTypeBuilder:
        storage = ValueStorage(typ, ownership, is_constant=False)
        return self.property_storage(
            name, storage, is_static=is_static, optional=optional, accessor=accessor
        )

    def property_storage(
        self,
        name: str,
        storage: ValueStorage,
        *,
        is_static: bool = False,
        optional: bool = False,
        accessor: KnownPropertyAccessor = KnownPropertyAccessor.GETTER_AND_SETTER,
    ) -> KnownTypeBuilder:
        if _contains_member(self._type.known_properties, name, storage, is_static):
            return self
        prop = _SynthesizedProperty(self._type, name, storage, is_static, optional, accessor)
        self._type.known_properties.append(prop)
        return self

    def field(
        self,
        name: str,
        typ: SwiftType,
        *,
        is_constant: bool = False,
        is_static: bool = False,
    ) -> KnownTypeBuilder:
        storage = ValueStorage(typ, Ownership.STRONG, is_constant)
        return self.field_storage(name, storage, is_static=is_static)

    def field_storage(
        self, name: str, storage: ValueStorage, *, is_static: bool = False
    ) -> KnownTypeBuilder:
        if _contains_member(self._type.known_fields, name, storage, is_static):
            return self
        self._type.known_fields.append(_SynthesizedProperty(self._type, name, storage, is_static))
        return self

    # ── conformances ─────────────────────────────────────────

    def protocol_conformance(self, protocol_name: str) -> KnownTypeBuilder:
        for conformance in self._type.known_protocol_conformances:
            if conformance.protocol_name == protocol_name:
                return self
        self._type.known_protocol_conformances.append(_SynthesizedConformance(protocol_name))
        return self

    def build(self) -> KnownType:
        """Return a snapshot of the type built so far.

        The builder stays usable afterwards; later mutations do not reach
        types already returned.
        """
        return copy.deepcopy(self._type)


def _contains_member(
    members: list[KnownProperty], name: str, storage: ValueStorage, is_static: bool
) -> bool:
    for member in members:
        if member.name == name and member.storage == storage and member.is_static == is_static:
            return True
    return False

"""Member intentions: properties, instance variables, methods, initializers,
global functions and function bodies."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..ir import (
    AccessLevel,
    CompoundStatement,
    Expression,
    FunctionSignature,
    ParameterSignature,
    SelectorSignature,
    SwiftType,
    ValueStorage,
)
from ..known_type import KnownPropertyAccessor
from .base import FromSourceIntention, SourceNode

if TYPE_CHECKING:
    from .types import TypeGenerationIntention


class FunctionBodyIntention(FromSourceIntention):
    """Statements of a method, initializer, accessor or global function."""

    def __init__(
        self, body: CompoundStatement | None = None, source: SourceNode | None = None
    ) -> None:
        super().__init__(source=source)
        self.body: CompoundStatement = body if body is not None else CompoundStatement()

    def __repr__(self) -> str:
        return "FunctionBodyIntention(" + repr(self.body) + ")"


class MemberGenerationIntention(FromSourceIntention):
    """A member of a type intention."""

    @property
    def owner_type(self) -> TypeGenerationIntention | None:
        """The type intention currently holding this member."""
        from .types import TypeGenerationIntention

        parent = self.parent
        if isinstance(parent, TypeGenerationIntention):
            return parent
        return None

    @property
    def is_static(self) -> bool:
        return False


# ============================================================
# PROPERTIES
# ============================================================


@dataclass(frozen=True)
class PropertySetter:
    value_identifier: str
    body: FunctionBodyIntention


@dataclass(frozen=True)
class StoredMode:
    """Plain stored property."""


@dataclass(frozen=True)
class ComputedMode:
    """Read-only computed property."""

    getter: FunctionBodyIntention


@dataclass(frozen=True)
class GetterSetterMode:
    """Computed property with both accessors."""

    getter: FunctionBodyIntention
    setter: PropertySetter


PropertyMode = StoredMode | ComputedMode | GetterSetterMode


class PropertyGenerationIntention(MemberGenerationIntention):
    """An Objective-C @property, generated as a Swift `var`.

    Created in StoredMode; the property merge pass switches it to a computed
    mode when it absorbs accessor methods.
    """

    def __init__(
        self,
        name: str,
        storage: ValueStorage,
        attributes: list[str] | None = None,
        access_level: AccessLevel = AccessLevel.INTERNAL,
        source: SourceNode | None = None,
    ) -> None:
        super().__init__(access_level, source)
        self.name: str = name
        self.storage: ValueStorage = storage
        self.attributes: list[str] = list(attributes) if attributes is not None else []
        self.mode: PropertyMode = StoredMode()
        self.initial_value: Expression | None = None

    @property
    def type(self) -> SwiftType:
        return self.storage.type

    @type.setter
    def type(self, value: SwiftType) -> None:
        self.storage = self.storage.with_type(value)

    @property
    def is_source_read_only(self) -> bool:
        """True when declared `readonly` in the Objective-C source."""
        return "readonly" in self.attributes

    @property
    def is_static(self) -> bool:
        return "class" in self.attributes

    @property
    def optional(self) -> bool:
        return False

    @property
    def accessor(self) -> KnownPropertyAccessor:
        if isinstance(self.mode, ComputedMode):
            return KnownPropertyAccessor.GETTER
        if isinstance(self.mode, StoredMode) and self.is_source_read_only:
            return KnownPropertyAccessor.GETTER
        return KnownPropertyAccessor.GETTER_AND_SETTER

    def __repr__(self) -> str:
        return "PropertyGenerationIntention(" + self.name + ": " + str(self.type) + ")"


class ProtocolPropertyGenerationIntention(PropertyGenerationIntention):
    """A property requirement declared in a protocol."""

    def __init__(
        self,
        name: str,
        storage: ValueStorage,
        attributes: list[str] | None = None,
        is_optional: bool = False,
        access_level: AccessLevel = AccessLevel.INTERNAL,
        source: SourceNode | None = None,
    ) -> None:
        super().__init__(name, storage, attributes, access_level, source)
        self.is_optional: bool = is_optional

    @property
    def optional(self) -> bool:
        return self.is_optional


class InstanceVariableGenerationIntention(MemberGenerationIntention):
    """An Objective-C instance variable, generated as a stored Swift field."""

    def __init__(
        self,
        name: str,
        storage: ValueStorage,
        access_level: AccessLevel = AccessLevel.INTERNAL,
        source: SourceNode | None = None,
    ) -> None:
        super().__init__(access_level, source)
        self.name: str = name
        self.storage: ValueStorage = storage

    @property
    def type(self) -> SwiftType:
        return self.storage.type

    @property
    def is_constant(self) -> bool:
        return self.storage.is_constant

    @property
    def optional(self) -> bool:
        return False

    @property
    def accessor(self) -> KnownPropertyAccessor:
        return KnownPropertyAccessor.GETTER_AND_SETTER

    def __repr__(self) -> str:
        return "InstanceVariableGenerationIntention(" + self.name + ": " + str(self.type) + ")"


# ============================================================
# FUNCTIONS
# ============================================================


class MethodGenerationIntention(MemberGenerationIntention):
    """An Objective-C method, generated as a Swift `func`."""

    def __init__(
        self,
        signature: FunctionSignature,
        function_body: FunctionBodyIntention | None = None,
        access_level: AccessLevel = AccessLevel.INTERNAL,
        source: SourceNode | None = None,
    ) -> None:
        super().__init__(access_level, source)
        self.signature: FunctionSignature = signature
        self.function_body: FunctionBodyIntention | None = function_body

    @property
    def name(self) -> str:
        return self.signature.name

    @property
    def parameters(self) -> tuple[ParameterSignature, ...]:
        return self.signature.parameters

    @property
    def return_type(self) -> SwiftType:
        return self.signature.return_type

    @property
    def is_static(self) -> bool:
        return self.signature.is_static

    @property
    def selector(self) -> SelectorSignature:
        return self.signature.selector

    @property
    def optional(self) -> bool:
        return False

    def __repr__(self) -> str:
        return type(self).__name__ + "(" + repr(self.signature) + ")"


class ProtocolMethodGenerationIntention(MethodGenerationIntention):
    """A method requirement declared in a protocol (`@optional` aware)."""

    def __init__(
        self,
        signature: FunctionSignature,
        function_body: FunctionBodyIntention | None = None,
        is_optional: bool = False,
        access_level: AccessLevel = AccessLevel.INTERNAL,
        source: SourceNode | None = None,
    ) -> None:
        super().__init__(signature, function_body, access_level, source)
        self.is_optional: bool = is_optional

    @property
    def optional(self) -> bool:
        return self.is_optional


class InitGenerationIntention(MemberGenerationIntention):
    """A Swift initializer."""

    def __init__(
        self,
        parameters: list[ParameterSignature] | None = None,
        function_body: FunctionBodyIntention | None = None,
        is_failable: bool = False,
        access_level: AccessLevel = AccessLevel.INTERNAL,
        source: SourceNode | None = None,
    ) -> None:
        super().__init__(access_level, source)
        self.parameters: list[ParameterSignature] = list(parameters) if parameters else []
        self.function_body: FunctionBodyIntention | None = function_body
        self.is_failable: bool = is_failable

    def __repr__(self) -> str:
        return "InitGenerationIntention(" + repr(self.parameters) + ")"


class GlobalFunctionGenerationIntention(FromSourceIntention):
    """A free C function, generated as a global Swift `func`."""

    def __init__(
        self,
        signature: FunctionSignature,
        function_body: FunctionBodyIntention | None = None,
        access_level: AccessLevel = AccessLevel.INTERNAL,
        source: SourceNode | None = None,
    ) -> None:
        super().__init__(access_level, source)
        self.signature: FunctionSignature = signature
        self.function_body: FunctionBodyIntention | None = function_body

    @property
    def name(self) -> str:
        return self.signature.name

    @property
    def is_declaration_only(self) -> bool:
        return self.function_body is None

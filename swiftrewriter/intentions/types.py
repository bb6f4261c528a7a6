"""Type intentions: classes, class extensions, protocols and structs.

Containers own their members through ordered, identity-based lists. Adding
a member detaches it from whatever container held it before, so no member
is ever held by two containers and member.parent always names the holder.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..ir import AccessLevel, FunctionSignature
from ..known_type import KnownTypeKind, KnownTypeReference
from .base import FromSourceIntention, Intention, SourceKind, SourceNode
from .members import (
    InitGenerationIntention,
    InstanceVariableGenerationIntention,
    MethodGenerationIntention,
    PropertyGenerationIntention,
)


@runtime_checkable
class InstanceVariableContainerIntention(Protocol):
    """Capability of intentions that can hold instance variables."""

    @property
    def instance_variables(self) -> list[InstanceVariableGenerationIntention]: ...

    def add_instance_variable(self, intention: InstanceVariableGenerationIntention) -> None: ...

    def remove_instance_variable(self, name: str) -> None: ...

    def has_instance_variable(self, name: str) -> bool: ...


class ProtocolInheritanceIntention(FromSourceIntention):
    """Conformance of a type to a protocol."""

    def __init__(
        self,
        protocol_name: str,
        access_level: AccessLevel = AccessLevel.INTERNAL,
        source: SourceNode | None = None,
    ) -> None:
        super().__init__(access_level, source)
        self.protocol_name: str = protocol_name

    def __repr__(self) -> str:
        return "ProtocolInheritanceIntention(" + self.protocol_name + ")"


def detach(member: Intention) -> None:
    """Remove member from the container currently holding it, if any."""
    parent = member.parent
    if parent is None:
        return
    remove = getattr(parent, "remove_member", None)
    if remove is not None:
        remove(member)
    member.parent = None


def remove_identical(items: list, member: object) -> bool:
    for i, item in enumerate(items):
        if item is member:
            del items[i]
            return True
    return False


class TypeGenerationIntention(FromSourceIntention):
    """Base for intentions that generate a Swift type declaration."""

    kind: KnownTypeKind = KnownTypeKind.CLASS

    def __init__(
        self,
        type_name: str,
        access_level: AccessLevel = AccessLevel.INTERNAL,
        source: SourceNode | None = None,
    ) -> None:
        super().__init__(access_level, source)
        self.type_name: str = type_name
        self._properties: list[PropertyGenerationIntention] = []
        self._methods: list[MethodGenerationIntention] = []
        self._constructors: list[InitGenerationIntention] = []
        self._protocols: list[ProtocolInheritanceIntention] = []

    def __repr__(self) -> str:
        return type(self).__name__ + "(" + self.type_name + ")"

    # ── KnownType ────────────────────────────────────────────

    @property
    def supertype(self) -> KnownTypeReference | None:
        return None

    @property
    def origin(self) -> str:
        if self.source is None:
            return "Synthesized intention"
        return (
            self.source.kind.value + " at " + self.source.file_path + ":" + str(self.source.line)
        )

    @property
    def known_constructors(self) -> list[InitGenerationIntention]:
        return self.constructors

    @property
    def known_methods(self) -> list[MethodGenerationIntention]:
        return self.methods

    @property
    def known_properties(self) -> list[PropertyGenerationIntention]:
        return self.properties

    @property
    def known_fields(self) -> list[InstanceVariableGenerationIntention]:
        return []

    @property
    def known_protocol_conformances(self) -> list[ProtocolInheritanceIntention]:
        return self.protocols

    # ── members ──────────────────────────────────────────────

    @property
    def properties(self) -> list[PropertyGenerationIntention]:
        return list(self._properties)

    @property
    def methods(self) -> list[MethodGenerationIntention]:
        return list(self._methods)

    @property
    def constructors(self) -> list[InitGenerationIntention]:
        return list(self._constructors)

    @property
    def protocols(self) -> list[ProtocolInheritanceIntention]:
        return list(self._protocols)

    def add_property(self, intention: PropertyGenerationIntention) -> None:
        detach(intention)
        self._properties.append(intention)
        intention.parent = self

    def remove_property(self, intention: PropertyGenerationIntention) -> None:
        if remove_identical(self._properties, intention):
            intention.parent = None

    def add_method(self, intention: MethodGenerationIntention) -> None:
        detach(intention)
        self._methods.append(intention)
        intention.parent = self

    def remove_method(self, intention: MethodGenerationIntention) -> None:
        if remove_identical(self._methods, intention):
            intention.parent = None

    def add_constructor(self, intention: InitGenerationIntention) -> None:
        detach(intention)
        self._constructors.append(intention)
        intention.parent = self

    def remove_constructor(self, intention: InitGenerationIntention) -> None:
        if remove_identical(self._constructors, intention):
            intention.parent = None

    def add_protocol(self, intention: ProtocolInheritanceIntention) -> None:
        detach(intention)
        self._protocols.append(intention)
        intention.parent = self

    def remove_protocol(self, intention: ProtocolInheritanceIntention) -> None:
        if remove_identical(self._protocols, intention):
            intention.parent = None

    def remove_member(self, intention: Intention) -> None:
        """Remove any kind of member by identity."""
        if isinstance(intention, PropertyGenerationIntention):
            self.remove_property(intention)
        elif isinstance(intention, MethodGenerationIntention):
            self.remove_method(intention)
        elif isinstance(intention, InitGenerationIntention):
            self.remove_constructor(intention)
        elif isinstance(intention, ProtocolInheritanceIntention):
            self.remove_protocol(intention)

    # ── lookup ───────────────────────────────────────────────

    def property_named(self, name: str) -> PropertyGenerationIntention | None:
        for prop in self._properties:
            if prop.name == name:
                return prop
        return None

    def has_property(self, name: str) -> bool:
        return self.property_named(name) is not None

    def methods_named(self, name: str) -> list[MethodGenerationIntention]:
        return [m for m in self._methods if m.name == name]

    def method_matching_selector(
        self, signature: FunctionSignature
    ) -> MethodGenerationIntention | None:
        for method in self._methods:
            if method.signature.matches_as_selector(signature):
                return method
        return None

    def conforms_to(self, protocol_name: str) -> bool:
        return any(p.protocol_name == protocol_name for p in self._protocols)


class _InstanceVariableStore(TypeGenerationIntention):
    """Instance-variable storage shared by classes, extensions and structs."""

    def __init__(
        self,
        type_name: str,
        access_level: AccessLevel = AccessLevel.INTERNAL,
        source: SourceNode | None = None,
    ) -> None:
        super().__init__(type_name, access_level, source)
        self._instance_variables: list[InstanceVariableGenerationIntention] = []

    @property
    def instance_variables(self) -> list[InstanceVariableGenerationIntention]:
        return list(self._instance_variables)

    @property
    def known_fields(self) -> list[InstanceVariableGenerationIntention]:
        return self.instance_variables

    def add_instance_variable(self, intention: InstanceVariableGenerationIntention) -> None:
        """Add an instance variable; an existing one with the same name is replaced."""
        detach(intention)
        self.remove_instance_variable(intention.name)
        self._instance_variables.append(intention)
        intention.parent = self

    def remove_instance_variable(self, name: str) -> None:
        for i, ivar in enumerate(self._instance_variables):
            if ivar.name == name:
                del self._instance_variables[i]
                ivar.parent = None
                return

    def has_instance_variable(self, name: str) -> bool:
        return any(ivar.name == name for ivar in self._instance_variables)

    def instance_variable_named(self, name: str) -> InstanceVariableGenerationIntention | None:
        for ivar in self._instance_variables:
            if ivar.name == name:
                return ivar
        return None

    def remove_member(self, intention: Intention) -> None:
        if isinstance(intention, InstanceVariableGenerationIntention):
            if remove_identical(self._instance_variables, intention):
                intention.parent = None
            return
        super().remove_member(intention)


class BaseClassIntention(_InstanceVariableStore):
    """Base intention for classes and class extensions (categories)."""

    @property
    def is_interface_source(self) -> bool:
        """True when this intention came from an @interface declaration."""
        return self.source is not None and self.source.kind in (
            SourceKind.CLASS_INTERFACE,
            SourceKind.CATEGORY_INTERFACE,
        )


class ClassGenerationIntention(BaseClassIntention):
    """An intention to generate a Swift class."""

    def __init__(
        self,
        type_name: str,
        superclass_name: str | None = None,
        access_level: AccessLevel = AccessLevel.INTERNAL,
        source: SourceNode | None = None,
    ) -> None:
        super().__init__(type_name, access_level, source)
        self.superclass_name: str | None = superclass_name

    @property
    def supertype(self) -> KnownTypeReference | None:
        if self.superclass_name is not None:
            return KnownTypeReference.named(self.superclass_name)
        return None


class ClassExtensionGenerationIntention(BaseClassIntention):
    """An intention to generate an extension of an existing class."""

    def __init__(
        self,
        type_name: str,
        category_name: str | None = None,
        access_level: AccessLevel = AccessLevel.INTERNAL,
        source: SourceNode | None = None,
    ) -> None:
        super().__init__(type_name, access_level, source)
        # Original Objective-C category name; empty for class extensions `()`
        self.category_name: str | None = category_name


class ProtocolGenerationIntention(TypeGenerationIntention):
    """An intention to generate a Swift protocol."""

    kind = KnownTypeKind.PROTOCOL


class StructGenerationIntention(_InstanceVariableStore):
    """An intention to generate a Swift struct from a C struct."""

    kind = KnownTypeKind.STRUCT

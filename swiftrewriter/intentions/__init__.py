"""Intention object model - mutable declarations bound for Swift output."""

from .base import (
    FromSourceIntention,
    Intention,
    IntentionHistory,
    IntentionHistoryEntry,
    SourceKind,
    SourceNode,
)
from .files import FileGenerationIntention, IntentionCollection
from .members import (
    ComputedMode,
    FunctionBodyIntention,
    GetterSetterMode,
    GlobalFunctionGenerationIntention,
    InitGenerationIntention,
    InstanceVariableGenerationIntention,
    MemberGenerationIntention,
    MethodGenerationIntention,
    PropertyGenerationIntention,
    PropertyMode,
    PropertySetter,
    ProtocolMethodGenerationIntention,
    ProtocolPropertyGenerationIntention,
    StoredMode,
)
from .types import (
    BaseClassIntention,
    ClassExtensionGenerationIntention,
    ClassGenerationIntention,
    InstanceVariableContainerIntention,
    ProtocolGenerationIntention,
    ProtocolInheritanceIntention,
    StructGenerationIntention,
    TypeGenerationIntention,
)

__all__ = [
    "BaseClassIntention",
    "ClassExtensionGenerationIntention",
    "ClassGenerationIntention",
    "ComputedMode",
    "FileGenerationIntention",
    "FromSourceIntention",
    "FunctionBodyIntention",
    "GetterSetterMode",
    "GlobalFunctionGenerationIntention",
    "InitGenerationIntention",
    "InstanceVariableContainerIntention",
    "InstanceVariableGenerationIntention",
    "Intention",
    "IntentionCollection",
    "IntentionHistory",
    "IntentionHistoryEntry",
    "MemberGenerationIntention",
    "MethodGenerationIntention",
    "PropertyGenerationIntention",
    "PropertyMode",
    "PropertySetter",
    "ProtocolGenerationIntention",
    "ProtocolInheritanceIntention",
    "ProtocolMethodGenerationIntention",
    "ProtocolPropertyGenerationIntention",
    "SourceKind",
    "SourceNode",
    "StoredMode",
    "StructGenerationIntention",
    "TypeGenerationIntention",
]

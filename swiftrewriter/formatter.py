"""Canonical textual rendering of known types and their members.

Used for history descriptions, diagnostics and snapshot-style tests; the
same model always renders to the same bytes.
"""

from __future__ import annotations

from .backend.util import Emitter
from .ir import VOID, FunctionSignature, Ownership, ParameterSignature, SwiftType
from .intentions import ClassExtensionGenerationIntention
from .known_type import KnownMethod, KnownProperty, KnownPropertyAccessor, KnownType


def stringify(typ: SwiftType) -> str:
    return str(typ)


def as_string_known_type(typ: KnownType) -> str:
    """Full declaration-like rendering of a type and its members.

    Body order: static fields, static properties, instance fields, instance
    properties, then constructors and methods; each group in insertion order.
    """
    out = Emitter()
    header = typ.kind.value + " " + typ.type_name
    inheritances: list[str] = []
    if typ.supertype is not None:
        inheritances.append(typ.supertype.as_type_name)
    for conformance in typ.known_protocol_conformances:
        inheritances.append(conformance.protocol_name)
    if len(inheritances) > 0:
        header += ": " + ", ".join(inheritances)
    out.line(header + " {")
    out.indent += 1
    fields = typ.known_fields
    properties = typ.known_properties
    for f in fields:
        if f.is_static:
            out.line(as_string_field(f, typ, with_type_name=False, include_var_keyword=True))
    for p in properties:
        if p.is_static:
            out.line(_type_body_property(p, typ))
    for f in fields:
        if not f.is_static:
            out.line(as_string_field(f, typ, with_type_name=False, include_var_keyword=True))
    for p in properties:
        if not p.is_static:
            out.line(_type_body_property(p, typ))
    constructors = typ.known_constructors
    methods = typ.known_methods
    if (len(fields) > 0 or len(properties) > 0) and (len(constructors) > 0 or len(methods) > 0):
        out.line()
    for ctor in constructors:
        out.line("init" + as_string_parameters(ctor.parameters))
    for method in methods:
        out.line(as_string_signature(method.signature, include_name=True, include_func_keyword=True))
    out.indent -= 1
    out.line("}")
    return out.output()


def _type_body_property(prop: KnownProperty, typ: KnownType) -> str:
    return as_string_property(
        prop,
        typ,
        with_type_name=False,
        include_var_keyword=True,
        include_accessors=prop.accessor != KnownPropertyAccessor.GETTER_AND_SETTER,
    )


def as_string_method(method: KnownMethod, of_type: KnownType, with_type_name: bool = True) -> str:
    """e.g. `Foo.setName(_ v: String)` or `static Foo.shared() -> Foo`."""
    signature = method.signature
    result = "static " if signature.is_static else ""
    if with_type_name:
        result += of_type.type_name + "."
    result += signature.name + as_string_parameters(signature.parameters)
    if signature.return_type != VOID:
        result += " -> " + stringify(signature.return_type)
    return result


def _ownership_prefix(ownership: Ownership) -> str:
    if ownership == Ownership.STRONG:
        return ""
    return ownership.value + " "


def as_string_property(
    prop: KnownProperty,
    of_type: KnownType,
    with_type_name: bool = True,
    include_var_keyword: bool = False,
    include_accessors: bool = False,
) -> str:
    result = "static " if prop.is_static else ""
    result += _ownership_prefix(prop.storage.ownership)
    if include_var_keyword:
        result += "var "
    if with_type_name:
        result += of_type.type_name + "."
    result += prop.name + ": " + stringify(prop.storage.type)
    if include_accessors:
        if prop.accessor == KnownPropertyAccessor.GETTER:
            result += " { get }"
        else:
            result += " { get set }"
    return result


def as_string_field(
    field: KnownProperty,
    of_type: KnownType,
    with_type_name: bool = True,
    include_var_keyword: bool = False,
) -> str:
    result = "static " if field.is_static else ""
    result += _ownership_prefix(field.storage.ownership)
    if include_var_keyword:
        result += "let " if field.storage.is_constant else "var "
    if with_type_name:
        result += of_type.type_name + "."
    result += field.name + ": " + stringify(field.storage.type)
    return result


def as_string_extension(ext: ClassExtensionGenerationIntention) -> str:
    result = "extension " + ext.type_name
    if ext.category_name is not None:
        result += " (" + ext.category_name + ")"
    return result


def as_string_signature(
    signature: FunctionSignature,
    include_name: bool = False,
    include_func_keyword: bool = False,
) -> str:
    result = ""
    if signature.is_static:
        result += "static "
    if signature.is_mutating:
        result += "mutating "
    if include_func_keyword:
        result += "func "
    if include_name:
        result += signature.name
    result += as_string_parameters(signature.parameters)
    if signature.return_type != VOID:
        result += " -> " + stringify(signature.return_type)
    return result


def as_string_parameters(parameters: list[ParameterSignature] | tuple[ParameterSignature, ...]) -> str:
    """Parenthesized parameter list; `()` when empty."""
    parts: list[str] = []
    for param in parameters:
        text = ""
        if param.label is None:
            text += "_ "
        elif param.label != param.name:
            text += param.label + " "
        text += param.name + ": " + stringify(param.type)
        parts.append(text)
    return "(" + ", ".join(parts) + ")"

"""Nullability merging between related declarations.

Objective-C pointers without a nullability annotation arrive as
NullabilityUnspecifiedType. When the same declaration is seen elsewhere with
an annotation (a header, a protocol requirement), the annotated type wins.
"""

from __future__ import annotations

from dataclasses import replace

from ..ir import (
    FunctionSignature,
    SwiftType,
    deep_unwrapped,
    is_nullability_unspecified,
)


def merge_nullability(target: SwiftType, source: SwiftType) -> SwiftType:
    """Return source when it annotates the same type target leaves unspecified."""
    if not is_nullability_unspecified(target):
        return target
    if is_nullability_unspecified(source):
        return target
    if deep_unwrapped(target) != deep_unwrapped(source):
        return target
    return source


def merge_signature_nullability(
    target: FunctionSignature, source: FunctionSignature
) -> FunctionSignature:
    """Merge return and parameter nullability from source into target.

    Parameter labels and names of target are kept. Signatures with different
    parameter counts are returned unchanged.
    """
    if len(target.parameters) != len(source.parameters):
        return target
    params = []
    for own, other in zip(target.parameters, source.parameters):
        merged = merge_nullability(own.type, other.type)
        if merged is not own.type:
            own = replace(own, type=merged)
        params.append(own)
    result = target.with_parameters(params)
    return result.with_return_type(merge_nullability(target.return_type, source.return_type))


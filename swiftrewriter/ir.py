"""swiftrewriter IR - value objects shared by intentions, passes and backends.

This module defines the structural Swift type model, storage descriptors,
function signatures and the small statement/expression AST used for
function bodies.

Architecture:
    Objective-C AST -> intention builders -> [Intentions] -> passes -> Backend -> Swift

Types, storages and signatures are frozen (immutable, hashable) and are used
as comparison keys throughout the passes.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum


# ============================================================
# ACCESS AND OWNERSHIP
# ============================================================


class AccessLevel(Enum):
    """Swift access control level of a declaration."""

    PRIVATE = "private"
    FILEPRIVATE = "fileprivate"
    INTERNAL = "internal"
    PUBLIC = "public"
    OPEN = "open"


class Ownership(Enum):
    """Reference ownership of a stored value.

    | Kind            | Objective-C          | Swift              |
    |-----------------|----------------------|--------------------|
    | strong          | strong, retain, copy | (default)          |
    | weak            | weak                 | weak var           |
    | unowned(safe)   | assign (objects)     | unowned(safe) var  |
    | unowned(unsafe) | unsafe_unretained    | unowned(unsafe) var|
    """

    STRONG = "strong"
    WEAK = "weak"
    UNOWNED_SAFE = "unowned(safe)"
    UNOWNED_UNSAFE = "unowned(unsafe)"


# ============================================================
# TYPES
#
# Structural equality: two types are equal iff their trees are equal.
# str() renders Swift syntax that the signature parser accepts back.
# ============================================================


class BlockTypeAttribute(Enum):
    """Attributes a function (block) type can carry.

    Declaration order is the rendering order.
    """

    AUTOCLOSURE = "autoclosure"
    ESCAPING = "escaping"
    CONVENTION_C = "convention(c)"
    CONVENTION_BLOCK = "convention(block)"


@dataclass(frozen=True)
class SwiftType:
    """Base for all types. Abstract."""


@dataclass(frozen=True)
class TypeName(SwiftType):
    """A nominal type referenced by name, e.g. `Int`, `NSString`, `Foundation.Date`."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class GenericType(SwiftType):
    """A nominal type with generic arguments, e.g. `Set<String>`."""

    name: str
    arguments: tuple[SwiftType, ...]

    def __str__(self) -> str:
        return self.name + "<" + ", ".join(str(a) for a in self.arguments) + ">"


@dataclass(frozen=True)
class OptionalType(SwiftType):
    """`T?`"""

    wrapped: SwiftType

    def __str__(self) -> str:
        return _postfix_operand(self.wrapped) + "?"


@dataclass(frozen=True)
class ImplicitlyUnwrappedOptionalType(SwiftType):
    """`T!`"""

    wrapped: SwiftType

    def __str__(self) -> str:
        return _postfix_operand(self.wrapped) + "!"


@dataclass(frozen=True)
class NullabilityUnspecifiedType(SwiftType):
    """Pointer type with no nullability annotation in the Objective-C source.

    Rendered like an implicitly unwrapped optional; passes replace it with a
    concrete nullability when one can be inferred from a related declaration.
    """

    wrapped: SwiftType

    def __str__(self) -> str:
        return _postfix_operand(self.wrapped) + "!"


@dataclass(frozen=True)
class ArrayType(SwiftType):
    """`[T]`"""

    element: SwiftType

    def __str__(self) -> str:
        return "[" + str(self.element) + "]"


@dataclass(frozen=True)
class DictionaryType(SwiftType):
    """`[K: V]`"""

    key: SwiftType
    value: SwiftType

    def __str__(self) -> str:
        return "[" + str(self.key) + ": " + str(self.value) + "]"


@dataclass(frozen=True)
class TupleType(SwiftType):
    """`(A, B, ...)`. The empty tuple is `Void`.

    Invariants:
    - never holds exactly one element (a parenthesized type is that type)
    """

    elements: tuple[SwiftType, ...]

    def __str__(self) -> str:
        if len(self.elements) == 0:
            return "Void"
        return "(" + ", ".join(str(e) for e in self.elements) + ")"


@dataclass(frozen=True)
class BlockType(SwiftType):
    """Function type `@attr (P1, P2) -> R`, from Objective-C blocks and
    function pointers."""

    return_type: SwiftType
    parameters: tuple[SwiftType, ...] = ()
    attributes: frozenset[BlockTypeAttribute] = frozenset()

    def __str__(self) -> str:
        prefix = ""
        for attr in BlockTypeAttribute:
            if attr in self.attributes:
                prefix += "@" + attr.value + " "
        params = ", ".join(str(p) for p in self.parameters)
        return prefix + "(" + params + ") -> " + str(self.return_type)

    def with_attributes(self, attributes: frozenset[BlockTypeAttribute]) -> BlockType:
        return replace(self, attributes=self.attributes | attributes)


@dataclass(frozen=True)
class MetatypeType(SwiftType):
    """`T.Type`"""

    inner: SwiftType

    def __str__(self) -> str:
        return _postfix_operand(self.inner) + ".Type"


@dataclass(frozen=True)
class ProtocolCompositionType(SwiftType):
    """`A & B`"""

    types: tuple[SwiftType, ...]

    def __str__(self) -> str:
        return " & ".join(str(t) for t in self.types)


VOID = TupleType(())
INT = TypeName("Int")
BOOL = TypeName("Bool")
STRING = TypeName("String")
ANY_OBJECT = TypeName("AnyObject")
INSTANCETYPE = TypeName("instancetype")


def _postfix_operand(typ: SwiftType) -> str:
    """Render a type used as the operand of a postfix `?`, `!` or `.Type`."""
    if isinstance(typ, (BlockType, ProtocolCompositionType)):
        return "(" + str(typ) + ")"
    return str(typ)


def is_optional(typ: SwiftType) -> bool:
    """True for `T?`, `T!` and nullability-unspecified pointers."""
    return isinstance(
        typ, (OptionalType, ImplicitlyUnwrappedOptionalType, NullabilityUnspecifiedType)
    )


def is_nullability_unspecified(typ: SwiftType) -> bool:
    return isinstance(typ, NullabilityUnspecifiedType)


def unwrapped(typ: SwiftType) -> SwiftType:
    """Strip a single optional layer, if any."""
    if is_optional(typ):
        return typ.wrapped  # type: ignore[attr-defined]
    return typ


def deep_unwrapped(typ: SwiftType) -> SwiftType:
    """Strip every optional layer: `Int??` and `Int!` both become `Int`."""
    while is_optional(typ):
        typ = typ.wrapped  # type: ignore[attr-defined]
    return typ


# ============================================================
# STORAGE
# ============================================================


@dataclass(frozen=True)
class ValueStorage:
    """Type, ownership and constancy of a stored value.

    Two storages are equal iff all three fields are equal.
    """

    type: SwiftType
    ownership: Ownership = Ownership.STRONG
    is_constant: bool = False

    def with_type(self, typ: SwiftType) -> ValueStorage:
        return replace(self, type=typ)


# ============================================================
# SIGNATURES
# ============================================================


@dataclass(frozen=True)
class ParameterSignature:
    """A function parameter.

    label is None when the parameter has no external label (`_ name: T`).
    """

    label: str | None
    name: str
    type: SwiftType

    @classmethod
    def named(cls, name: str, typ: SwiftType) -> ParameterSignature:
        """Parameter whose label is its own name (`name: T`)."""
        return cls(name, name, typ)


@dataclass(frozen=True)
class SelectorSignature:
    """Objective-C style selector: the function name followed by one keyword
    per parameter label."""

    is_static: bool
    keywords: tuple[str | None, ...]


@dataclass(frozen=True)
class FunctionSignature:
    """Name, parameters and return type of a function or method."""

    name: str
    parameters: tuple[ParameterSignature, ...] = ()
    return_type: SwiftType = VOID
    is_static: bool = False
    is_mutating: bool = False

    @property
    def selector(self) -> SelectorSignature:
        keywords: list[str | None] = [self.name]
        for param in self.parameters:
            keywords.append(param.label)
        return SelectorSignature(self.is_static, tuple(keywords))

    @property
    def swift_closure_type(self) -> BlockType:
        return BlockType(self.return_type, tuple(p.type for p in self.parameters))

    def matches_as_selector(self, other: FunctionSignature) -> bool:
        """Label and order sensitive; parameter and return types are ignored."""
        return self.selector == other.selector

    def matches_as_swift_function(self, other: FunctionSignature) -> bool:
        """Structural match on name, staticness, labels and parameter types."""
        if self.name != other.name or self.is_static != other.is_static:
            return False
        if len(self.parameters) != len(other.parameters):
            return False
        for p1, p2 in zip(self.parameters, other.parameters):
            if p1.label != p2.label or p1.type != p2.type:
                return False
        return True

    def with_name(self, name: str) -> FunctionSignature:
        return replace(self, name=name)

    def with_parameters(self, parameters: list[ParameterSignature]) -> FunctionSignature:
        return replace(self, parameters=tuple(parameters))

    def with_return_type(self, return_type: SwiftType) -> FunctionSignature:
        return replace(self, return_type=return_type)


# ============================================================
# EXPRESSIONS
#
# Function bodies carried through the pipeline. Only the shapes the passes
# synthesize or inspect are modelled; bodies produced upstream use the same
# nodes.
# ============================================================


@dataclass
class Expression:
    """Base for all expressions. Abstract."""


@dataclass
class IdentifierExpression(Expression):
    identifier: str

    def __str__(self) -> str:
        return self.identifier


@dataclass
class ConstantExpression(Expression):
    """Literal: int, float, bool, string or nil (value None)."""

    value: int | float | bool | str | None

    def __str__(self) -> str:
        if self.value is None:
            return "nil"
        if isinstance(self.value, bool):
            return "true" if self.value else "false"
        if isinstance(self.value, str):
            return '"' + self.value.replace("\\", "\\\\").replace('"', '\\"') + '"'
        return str(self.value)


@dataclass
class PrefixExpression(Expression):
    """Unary prefix operator: `-x`, `!flag`. Parenthesizes compound operands."""

    op: str
    exp: Expression

    def __str__(self) -> str:
        if isinstance(self.exp, (BinaryExpression, AssignmentExpression)):
            return self.op + "(" + str(self.exp) + ")"
        return self.op + str(self.exp)


@dataclass
class BinaryExpression(Expression):
    lhs: Expression
    op: str
    rhs: Expression

    def __str__(self) -> str:
        return str(self.lhs) + " " + self.op + " " + str(self.rhs)


@dataclass
class AssignmentExpression(Expression):
    """`lhs = rhs`, or a compound assignment when op is e.g. `+=`."""

    lhs: Expression
    rhs: Expression
    op: str = "="

    def __str__(self) -> str:
        return str(self.lhs) + " " + self.op + " " + str(self.rhs)


@dataclass
class MemberExpression(Expression):
    """`base.member`"""

    base: Expression
    member: str

    def __str__(self) -> str:
        return str(self.base) + "." + self.member


@dataclass
class CallExpression(Expression):
    """`callee(label: arg, ...)`; labels entries may be None for unlabeled args."""

    callee: Expression
    arguments: list[Expression] = field(default_factory=list)
    labels: list[str | None] = field(default_factory=list)

    def __str__(self) -> str:
        parts: list[str] = []
        for i, arg in enumerate(self.arguments):
            label = self.labels[i] if i < len(self.labels) else None
            if label is not None:
                parts.append(label + ": " + str(arg))
            else:
                parts.append(str(arg))
        return str(self.callee) + "(" + ", ".join(parts) + ")"


# ============================================================
# STATEMENTS
# ============================================================


@dataclass
class Statement:
    """Base for all statements. Abstract."""


@dataclass
class ReturnStatement(Statement):
    exp: Expression | None = None


@dataclass
class ExpressionsStatement(Statement):
    """One or more expressions evaluated for side effects, one per line."""

    expressions: list[Expression]


@dataclass
class CompoundStatement(Statement):
    """A braced statement list; the body of every function intention."""

    statements: list[Statement] = field(default_factory=list)

    def is_empty(self) -> bool:
        return len(self.statements) == 0

"""Swift backend: render a FileGenerationIntention as Swift source."""

from __future__ import annotations

from ..ir import (
    VOID,
    AccessLevel,
    AssignmentExpression,
    BinaryExpression,
    CallExpression,
    CompoundStatement,
    ConstantExpression,
    Expression,
    ExpressionsStatement,
    FunctionSignature,
    IdentifierExpression,
    MemberExpression,
    Ownership,
    ParameterSignature,
    PrefixExpression,
    ReturnStatement,
    Statement,
    ValueStorage,
)
from ..intentions import (
    ClassExtensionGenerationIntention,
    ClassGenerationIntention,
    ComputedMode,
    FileGenerationIntention,
    FunctionBodyIntention,
    GetterSetterMode,
    GlobalFunctionGenerationIntention,
    InitGenerationIntention,
    InstanceVariableContainerIntention,
    InstanceVariableGenerationIntention,
    MethodGenerationIntention,
    PropertyGenerationIntention,
    ProtocolGenerationIntention,
    StoredMode,
    StructGenerationIntention,
    TypeGenerationIntention,
)
from ..known_type import KnownPropertyAccessor
from .util import Emitter, safe_identifier

# Swift's implicit setter parameter; `set(newValue)` is written `set`
DEFAULT_SETTER_IDENTIFIER = "newValue"


class SwiftBackend(Emitter):
    """Emit Swift code from a file intention."""

    def emit(self, file: FileGenerationIntention) -> str:
        self.lines: list[str] = []
        self.indent = 0
        for module in file.import_directives:
            self.line(f"import {module}")
        for func in file.global_function_intentions:
            self.blank_line()
            self._emit_global_function(func)
        ordered: list[TypeGenerationIntention] = []
        ordered.extend(file.protocol_intentions)
        ordered.extend(file.struct_intentions)
        ordered.extend(file.class_intentions)
        ordered.extend(file.extension_intentions)
        for typ in ordered:
            self.blank_line()
            self._emit_type(typ)
        while len(self.lines) > 0 and self.lines[0] == "":
            self.lines.pop(0)
        return self.output() + "\n"

    # ── helpers ──────────────────────────────────────────────

    def _safe(self, name: str) -> str:
        return safe_identifier(name)

    def _modifiers(self, access_level: AccessLevel, is_static: bool = False) -> str:
        result = ""
        if access_level != AccessLevel.INTERNAL:
            result += access_level.value + " "
        if is_static:
            result += "static "
        return result

    def _storage_prefix(self, storage: ValueStorage) -> str:
        if storage.ownership == Ownership.STRONG:
            return ""
        return storage.ownership.value + " "

    def _param(self, p: ParameterSignature) -> str:
        name = self._safe(p.name)
        if p.label is None:
            return f"_ {name}: {p.type}"
        if p.label != p.name:
            return f"{self._safe(p.label)} {name}: {p.type}"
        return f"{name}: {p.type}"

    def _params(self, params: list[ParameterSignature] | tuple[ParameterSignature, ...]) -> str:
        return "(" + ", ".join(self._param(p) for p in params) + ")"

    def _signature(self, sig: FunctionSignature) -> str:
        result = ""
        if sig.is_mutating:
            result += "mutating "
        result += f"func {self._safe(sig.name)}{self._params(sig.parameters)}"
        if sig.return_type != VOID:
            result += f" -> {sig.return_type}"
        return result

    def _emit_braced(self, header: str, body: FunctionBodyIntention | None) -> None:
        self.line(header + " {")
        self.indent += 1
        if body is not None:
            for stmt in body.body.statements:
                self._emit_stmt(stmt)
        self.indent -= 1
        self.line("}")

    # ── declarations ─────────────────────────────────────────

    def _emit_global_function(self, func: GlobalFunctionGenerationIntention) -> None:
        header = self._modifiers(func.access_level) + self._signature(func.signature)
        self._emit_braced(header, func.function_body)

    def _emit_type(self, typ: TypeGenerationIntention) -> None:
        if isinstance(typ, ProtocolGenerationIntention):
            self._emit_protocol(typ)
            return
        if isinstance(typ, ClassExtensionGenerationIntention):
            if typ.category_name:
                self.line(f"// MARK: - {typ.category_name}")
            header = f"extension {typ.type_name}"
        elif isinstance(typ, ClassGenerationIntention):
            header = f"class {typ.type_name}"
        elif isinstance(typ, StructGenerationIntention):
            header = f"struct {typ.type_name}"
        else:
            raise NotImplementedError(f"Swift type: {typ}")
        inheritances: list[str] = []
        if typ.supertype is not None:
            inheritances.append(typ.supertype.as_type_name)
        inheritances.extend(p.protocol_name for p in typ.protocols)
        if len(inheritances) > 0:
            header += ": " + ", ".join(inheritances)
        self.line(self._modifiers(typ.access_level) + header + " {")
        self.indent += 1
        if isinstance(typ, InstanceVariableContainerIntention):
            for ivar in typ.instance_variables:
                self._emit_instance_variable(ivar)
        for prop in typ.properties:
            if isinstance(prop.mode, StoredMode):
                self._separate(after_block_only=True)
            else:
                self._separate()
            self._emit_property(prop)
        for ctor in typ.constructors:
            self._separate()
            self._emit_init(ctor)
        for method in typ.methods:
            self._separate()
            self._emit_method(method)
        self.indent -= 1
        self.line("}")

    def _separate(self, after_block_only: bool = False) -> None:
        """Blank line between members, none right after an opening brace."""
        last = self.lines[-1].strip()
        if last.endswith("{"):
            return
        if after_block_only and last != "}":
            return
        self.blank_line()

    def _emit_protocol(self, proto: ProtocolGenerationIntention) -> None:
        header = f"protocol {proto.type_name}"
        if len(proto.protocols) > 0:
            header += ": " + ", ".join(p.protocol_name for p in proto.protocols)
        self.line(self._modifiers(proto.access_level) + header + " {")
        self.indent += 1
        for prop in proto.properties:
            optional = "@objc optional " if prop.optional else ""
            accessors = "{ get }" if prop.accessor == KnownPropertyAccessor.GETTER else "{ get set }"
            static = "static " if prop.is_static else ""
            self.line(f"{optional}{static}var {self._safe(prop.name)}: {prop.type} {accessors}")
        for ctor in proto.constructors:
            self.line("init" + ("?" if ctor.is_failable else "") + self._params(ctor.parameters))
        for method in proto.methods:
            optional = "@objc optional " if method.optional else ""
            static = "static " if method.is_static else ""
            self.line(optional + static + self._signature(method.signature))
        self.indent -= 1
        self.line("}")

    def _emit_instance_variable(self, ivar: InstanceVariableGenerationIntention) -> None:
        kw = "let" if ivar.is_constant else "var"
        prefix = self._modifiers(ivar.access_level) + self._storage_prefix(ivar.storage)
        self.line(f"{prefix}{kw} {self._safe(ivar.name)}: {ivar.type}")

    def _emit_property(self, prop: PropertyGenerationIntention) -> None:
        prefix = self._modifiers(prop.access_level, prop.is_static)
        prefix += self._storage_prefix(prop.storage)
        decl = f"{prefix}var {self._safe(prop.name)}: {prop.type}"
        mode = prop.mode
        if isinstance(mode, ComputedMode):
            self._emit_braced(decl, mode.getter)
        elif isinstance(mode, GetterSetterMode):
            self.line(decl + " {")
            self.indent += 1
            self._emit_braced("get", mode.getter)
            setter = mode.setter
            if setter.value_identifier == DEFAULT_SETTER_IDENTIFIER:
                self._emit_braced("set", setter.body)
            else:
                self._emit_braced(f"set({self._safe(setter.value_identifier)})", setter.body)
            self.indent -= 1
            self.line("}")
        elif prop.initial_value is not None:
            self.line(f"{decl} = {self._emit_expr(prop.initial_value)}")
        else:
            self.line(decl)

    def _emit_init(self, ctor: InitGenerationIntention) -> None:
        failable = "?" if ctor.is_failable else ""
        header = self._modifiers(ctor.access_level) + f"init{failable}{self._params(ctor.parameters)}"
        self._emit_braced(header, ctor.function_body)

    def _emit_method(self, method: MethodGenerationIntention) -> None:
        header = self._modifiers(method.access_level, method.is_static)
        self._emit_braced(header + self._signature(method.signature), method.function_body)

    # ── statements ───────────────────────────────────────────

    def _emit_stmt(self, stmt: Statement) -> None:
        if isinstance(stmt, ReturnStatement):
            self._emit_ReturnStatement(stmt)
        elif isinstance(stmt, ExpressionsStatement):
            self._emit_ExpressionsStatement(stmt)
        elif isinstance(stmt, CompoundStatement):
            self._emit_CompoundStatement(stmt)
        else:
            raise NotImplementedError(f"Swift stmt: {stmt}")

    def _emit_ReturnStatement(self, s: ReturnStatement) -> None:
        if s.exp is None:
            self.line("return")
        else:
            self.line(f"return {self._emit_expr(s.exp)}")

    def _emit_ExpressionsStatement(self, s: ExpressionsStatement) -> None:
        for exp in s.expressions:
            self.line(self._emit_expr(exp))

    def _emit_CompoundStatement(self, s: CompoundStatement) -> None:
        self.line("do {")
        self.indent += 1
        for st in s.statements:
            self._emit_stmt(st)
        self.indent -= 1
        self.line("}")

    # ── expressions ──────────────────────────────────────────

    def _emit_expr(self, expr: Expression) -> str:
        if isinstance(expr, IdentifierExpression):
            if expr.identifier in ("self", "super", "Self"):
                return expr.identifier
            return self._safe(expr.identifier)
        if isinstance(expr, ConstantExpression):
            return str(expr)
        if isinstance(expr, PrefixExpression):
            operand = self._emit_expr(expr.exp)
            if isinstance(expr.exp, (BinaryExpression, AssignmentExpression)):
                return f"{expr.op}({operand})"
            return f"{expr.op}{operand}"
        if isinstance(expr, BinaryExpression):
            return f"{self._emit_expr(expr.lhs)} {expr.op} {self._emit_expr(expr.rhs)}"
        if isinstance(expr, AssignmentExpression):
            return f"{self._emit_expr(expr.lhs)} {expr.op} {self._emit_expr(expr.rhs)}"
        if isinstance(expr, MemberExpression):
            return f"{self._emit_expr(expr.base)}.{expr.member}"
        if isinstance(expr, CallExpression):
            return self._emit_CallExpression(expr)
        raise NotImplementedError(f"Swift expr: {expr}")

    def _emit_CallExpression(self, expr: CallExpression) -> str:
        args: list[str] = []
        for i, arg in enumerate(expr.arguments):
            label = expr.labels[i] if i < len(expr.labels) else None
            val = self._emit_expr(arg)
            args.append(f"{label}: {val}" if label is not None else val)
        return f"{self._emit_expr(expr.callee)}({', '.join(args)})"


def emit_swift(file: FileGenerationIntention) -> str:
    return SwiftBackend().emit(file)

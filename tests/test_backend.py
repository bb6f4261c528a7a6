"""Tests for Swift source emission."""

from swiftrewriter.backend.swift import emit_swift
from swiftrewriter.backend.util import safe_identifier
from swiftrewriter.ir import (
    BOOL,
    INT,
    STRING,
    AccessLevel,
    AssignmentExpression,
    BinaryExpression,
    CallExpression,
    CompoundStatement,
    ConstantExpression,
    ExpressionsStatement,
    FunctionSignature,
    IdentifierExpression,
    MemberExpression,
    OptionalType,
    Ownership,
    ParameterSignature,
    PrefixExpression,
    ReturnStatement,
    TypeName,
    ValueStorage,
)
from swiftrewriter.intentions import (
    ClassExtensionGenerationIntention,
    ClassGenerationIntention,
    ComputedMode,
    FileGenerationIntention,
    FunctionBodyIntention,
    GetterSetterMode,
    GlobalFunctionGenerationIntention,
    InitGenerationIntention,
    InstanceVariableGenerationIntention,
    MethodGenerationIntention,
    PropertyGenerationIntention,
    PropertySetter,
    ProtocolGenerationIntention,
    ProtocolInheritanceIntention,
    ProtocolMethodGenerationIntention,
    ProtocolPropertyGenerationIntention,
)


def _body(*statements) -> FunctionBodyIntention:
    return FunctionBodyIntention(CompoundStatement(list(statements)))


def _ident(name: str) -> IdentifierExpression:
    return IdentifierExpression(name)


def test_class_with_all_member_kinds():
    f = FileGenerationIntention("Foo.m")
    f.import_directives.append("Foundation")
    cls = ClassGenerationIntention("Foo", "NSObject")
    cls.add_protocol(ProtocolInheritanceIntention("NSCopying"))
    cls.add_instance_variable(
        InstanceVariableGenerationIntention(
            "_name", ValueStorage(STRING), access_level=AccessLevel.PRIVATE
        )
    )
    cls.add_property(
        PropertyGenerationIntention(
            "delegate", ValueStorage(OptionalType(TypeName("Delegate")), Ownership.WEAK)
        )
    )
    name = PropertyGenerationIntention("name", ValueStorage(STRING))
    name.mode = GetterSetterMode(
        _body(ReturnStatement(_ident("_name"))),
        PropertySetter(
            "v", _body(ExpressionsStatement([AssignmentExpression(_ident("_name"), _ident("v"))]))
        ),
    )
    cls.add_property(name)
    cls.add_constructor(
        InitGenerationIntention(
            [ParameterSignature.named("name", STRING)],
            _body(
                ExpressionsStatement(
                    [AssignmentExpression(MemberExpression(_ident("self"), "name"), _ident("name"))]
                )
            ),
        )
    )
    cls.add_method(
        MethodGenerationIntention(
            FunctionSignature("run", (ParameterSignature(None, "times", INT),), BOOL),
            _body(ReturnStatement(ConstantExpression(True))),
        )
    )
    f.add_type(cls)
    expected = "\n".join(
        [
            "import Foundation",
            "",
            "class Foo: NSObject, NSCopying {",
            "    private var _name: String",
            "    weak var delegate: Delegate?",
            "",
            "    var name: String {",
            "        get {",
            "            return _name",
            "        }",
            "        set(v) {",
            "            _name = v",
            "        }",
            "    }",
            "",
            "    init(name: String) {",
            "        self.name = name",
            "    }",
            "",
            "    func run(_ times: Int) -> Bool {",
            "        return true",
            "    }",
            "}",
            "",
        ]
    )
    assert emit_swift(f) == expected


def test_default_setter_identifier_is_implicit():
    f = FileGenerationIntention("A.m")
    cls = ClassGenerationIntention("A")
    prop = PropertyGenerationIntention("x", ValueStorage(INT))
    prop.mode = GetterSetterMode(_body(), PropertySetter("newValue", _body()))
    cls.add_property(prop)
    f.add_type(cls)
    assert "        set {" in emit_swift(f).split("\n")


def test_protocol_and_extension():
    f = FileGenerationIntention("Foo.m")
    ext = ClassExtensionGenerationIntention("Foo", "Extras")
    is_empty = PropertyGenerationIntention("isEmpty", ValueStorage(BOOL))
    is_empty.mode = ComputedMode(
        _body(ReturnStatement(BinaryExpression(_ident("_count"), "==", ConstantExpression(0))))
    )
    ext.add_property(is_empty)
    proto = ProtocolGenerationIntention("Delegate")
    proto.add_property(
        ProtocolPropertyGenerationIntention(
            "title", ValueStorage(OptionalType(STRING)), ["readonly"], is_optional=True
        )
    )
    proto.add_method(
        ProtocolMethodGenerationIntention(
            FunctionSignature("didFinish", (ParameterSignature(None, "sender", TypeName("Foo")),))
        )
    )
    f.add_type(ext)
    f.add_type(proto)
    expected = "\n".join(
        [
            "protocol Delegate {",
            "    @objc optional var title: String? { get }",
            "    func didFinish(_ sender: Foo)",
            "}",
            "",
            "// MARK: - Extras",
            "extension Foo {",
            "    var isEmpty: Bool {",
            "        return _count == 0",
            "    }",
            "}",
            "",
        ]
    )
    assert emit_swift(f) == expected


def test_global_function_and_expressions():
    f = FileGenerationIntention("util.c")
    negated = PrefixExpression("-", BinaryExpression(_ident("v"), "+", ConstantExpression(1)))
    body = _body(
        ExpressionsStatement([CallExpression(_ident("print"), [negated])]),
        ReturnStatement(
            CallExpression(_ident("max"), [_ident("v"), ConstantExpression(0)], [None, "floor"])
        ),
    )
    f.add_global_function(
        GlobalFunctionGenerationIntention(
            FunctionSignature("clamp", (ParameterSignature(None, "v", INT),), INT), body
        )
    )
    expected = "\n".join(
        [
            "func clamp(_ v: Int) -> Int {",
            "    print(-(v + 1))",
            "    return max(v, floor: 0)",
            "}",
            "",
        ]
    )
    assert emit_swift(f) == expected


def test_reserved_words_are_quoted():
    assert safe_identifier("default") == "`default`"
    assert safe_identifier("name") == "name"
    f = FileGenerationIntention("A.m")
    cls = ClassGenerationIntention("A")
    cls.add_method(
        MethodGenerationIntention(
            FunctionSignature("default", (ParameterSignature("in", "in", INT),)), _body()
        )
    )
    f.add_type(cls)
    assert "    func `default`(`in`: Int) {" in emit_swift(f).split("\n")


def test_nested_compound_statement():
    f = FileGenerationIntention("A.m")
    cls = ClassGenerationIntention("A")
    cls.add_method(
        MethodGenerationIntention(
            FunctionSignature("reset"),
            _body(CompoundStatement([ReturnStatement()])),
        )
    )
    f.add_type(cls)
    lines = emit_swift(f).split("\n")
    assert lines[1:6] == [
        "    func reset() {",
        "        do {",
        "            return",
        "        }",
        "    }",
    ]

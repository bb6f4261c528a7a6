"""Tests for the canonical textual rendering of known types and members."""

from swiftrewriter.formatter import (
    as_string_extension,
    as_string_field,
    as_string_known_type,
    as_string_method,
    as_string_parameters,
    as_string_property,
    as_string_signature,
)
from swiftrewriter.intentions import (
    ClassExtensionGenerationIntention,
    ClassGenerationIntention,
    MethodGenerationIntention,
    PropertyGenerationIntention,
)
from swiftrewriter.ir import (
    BOOL,
    INT,
    STRING,
    FunctionSignature,
    OptionalType,
    Ownership,
    ParameterSignature,
    TypeName,
    ValueStorage,
)
from swiftrewriter.known_type import KnownPropertyAccessor, KnownTypeBuilder, KnownTypeKind


def _full_type():
    return (
        KnownTypeBuilder("Foo", supertype="NSObject")
        .protocol_conformance("NSCopying")
        .field("count", INT)
        .field("shared", STRING, is_static=True, is_constant=True)
        .property("name", STRING)
        .property("delegate", OptionalType(TypeName("Delegate")), ownership=Ownership.WEAK)
        .property("version", INT, is_static=True, accessor=KnownPropertyAccessor.GETTER)
        .constructor()
        .constructor_short([("name", STRING)])
        .method("run", [("times", INT)], BOOL)
        .method("make", returning=TypeName("Foo"), is_static=True)
        .build()
    )


def test_known_type_body_order():
    expected = "\n".join(
        [
            "class Foo: NSObject, NSCopying {",
            "    static let shared: String",
            "    static var version: Int { get }",
            "    var count: Int",
            "    var name: String",
            "    weak var delegate: Delegate?",
            "",
            "    init()",
            "    init(name: String)",
            "    func run(times: Int) -> Bool",
            "    static func make() -> Foo",
            "}",
        ]
    )
    assert as_string_known_type(_full_type()) == expected


def test_known_type_rendering_is_deterministic():
    assert as_string_known_type(_full_type()) == as_string_known_type(_full_type())


def test_no_blank_line_without_both_halves():
    typ = KnownTypeBuilder("Runner").method("run").build()
    assert as_string_known_type(typ) == "class Runner {\n    func run()\n}"
    empty = KnownTypeBuilder("P", kind=KnownTypeKind.PROTOCOL).build()
    assert as_string_known_type(empty) == "protocol P {\n}"


def test_class_intention_renders_as_known_type():
    cls = ClassGenerationIntention("Foo", superclass_name="NSObject")
    cls.add_property(
        PropertyGenerationIntention("title", ValueStorage(STRING), ["readonly"])
    )
    cls.add_method(MethodGenerationIntention(FunctionSignature("reload")))
    expected = "\n".join(
        [
            "class Foo: NSObject {",
            "    var title: String { get }",
            "",
            "    func reload()",
            "}",
        ]
    )
    assert as_string_known_type(cls) == expected


def test_method_with_type_name():
    cls = ClassGenerationIntention("Foo")
    getter = MethodGenerationIntention(FunctionSignature("name", (), STRING))
    setter = MethodGenerationIntention(
        FunctionSignature("setName", (ParameterSignature(None, "v", STRING),))
    )
    assert as_string_method(getter, cls) == "Foo.name() -> String"
    assert as_string_method(setter, cls) == "Foo.setName(_ v: String)"
    assert as_string_method(setter, cls, with_type_name=False) == "setName(_ v: String)"


def test_static_method():
    typ = _full_type()
    make = typ.known_methods[1]
    assert as_string_method(make, typ) == "static Foo.make() -> Foo"


def test_property_rendering():
    typ = _full_type()
    delegate = typ.known_properties[1]
    version = typ.known_properties[2]
    assert as_string_property(delegate, typ) == "weak Foo.delegate: Delegate?"
    assert (
        as_string_property(version, typ, with_type_name=False, include_var_keyword=True, include_accessors=True)
        == "static var version: Int { get }"
    )
    assert (
        as_string_property(delegate, typ, include_var_keyword=True, include_accessors=True)
        == "weak var Foo.delegate: Delegate? { get set }"
    )


def test_field_rendering():
    typ = _full_type()
    shared = typ.known_fields[1]
    assert as_string_field(shared, typ) == "static Foo.shared: String"
    assert as_string_field(shared, typ, with_type_name=False, include_var_keyword=True) == (
        "static let shared: String"
    )


def test_extension_rendering():
    assert as_string_extension(ClassExtensionGenerationIntention("Foo", "Extras")) == (
        "extension Foo (Extras)"
    )
    assert as_string_extension(ClassExtensionGenerationIntention("Foo")) == "extension Foo"


def test_signature_rendering():
    sig = FunctionSignature(
        "move",
        (ParameterSignature(None, "x", INT), ParameterSignature("to", "target", INT)),
        BOOL,
        is_static=True,
    )
    assert as_string_signature(sig) == "static (_ x: Int, to target: Int) -> Bool"
    assert as_string_signature(sig, include_name=True, include_func_keyword=True) == (
        "static func move(_ x: Int, to target: Int) -> Bool"
    )
    assert as_string_parameters([]) == "()"

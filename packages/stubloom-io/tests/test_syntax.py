import pytest

from stubloom.io import StubGenerator, StubSyntaxChecker, StubSyntaxError
from stubloom.spec import ClassDef, MethodDef, Module, Parameters, TypeInfo


def test_generated_stub_parses():
    cls = ClassDef(identity_key="C", name="C", module="m", doc='Has "quotes"')
    cls.add_method(MethodDef("f", Parameters(), TypeInfo.self_type(), doc="Doc."))
    source = StubGenerator().generate(
        Module(name="m", default_module_name="m", classes={"C": cls})
    )

    StubSyntaxChecker().check(source, "m")


def test_invalid_source_raises():
    with pytest.raises(StubSyntaxError) as excinfo:
        StubSyntaxChecker().check("def broken(:\n", "m")

    assert excinfo.value.module_name == "m"

# This must be the very first line to allow this package to coexist with other
# namespace packages in editable installs.
__path__ = __import__("pkgutil").extend_path(__path__, __name__)

from .type_info import ImportRef, TypeInfo
from .descriptors import (
    DefaultRenderer,
    DeprecatedInfo,
    MemberInfo,
    MethodInfo,
    MethodType,
    ModuleDocInfo,
    ParameterInfo,
    ParameterKind,
    PyClassInfo,
    PyComplexEnumInfo,
    PyEnumInfo,
    PyFunctionInfo,
    PyMethodsInfo,
    PyVariableInfo,
    TypeIgnore,
    TypeResolver,
    VariantForm,
    VariantInfo,
)
from .defaults import default_expr, default_value, fmt_py_obj
from .stub_type import StubType, TypeOverride, TypeTable, complex_enum_stub_type
from .models import (
    ClassDef,
    ComplexEnumDef,
    EnumDef,
    FunctionDef,
    GetterSetter,
    MemberContainer,
    MemberDef,
    MethodDef,
    Module,
    Parameter,
    Parameters,
    VariableDef,
    variant_class,
    variant_methods,
)
from .registry import Descriptor, DescriptorRegistry
from .rule_name import RuleName
from .exceptions import (
    DuplicateVariableError,
    MissingTypeDescriptorError,
    StubloomError,
    UnknownTypeReferenceError,
)
from .protocols import StubGeneratorProtocol, SyntaxCheckerProtocol

__all__ = [
    "ImportRef",
    "TypeInfo",
    "DefaultRenderer",
    "DeprecatedInfo",
    "MemberInfo",
    "MethodInfo",
    "MethodType",
    "ModuleDocInfo",
    "ParameterInfo",
    "ParameterKind",
    "PyClassInfo",
    "PyComplexEnumInfo",
    "PyEnumInfo",
    "PyFunctionInfo",
    "PyMethodsInfo",
    "PyVariableInfo",
    "TypeIgnore",
    "TypeResolver",
    "VariantForm",
    "VariantInfo",
    "default_expr",
    "default_value",
    "fmt_py_obj",
    "StubType",
    "TypeOverride",
    "TypeTable",
    "complex_enum_stub_type",
    # Entity IR
    "ClassDef",
    "ComplexEnumDef",
    "EnumDef",
    "FunctionDef",
    "GetterSetter",
    "MemberContainer",
    "MemberDef",
    "MethodDef",
    "Module",
    "Parameter",
    "Parameters",
    "VariableDef",
    "variant_class",
    "variant_methods",
    "Descriptor",
    "DescriptorRegistry",
    "RuleName",
    "DuplicateVariableError",
    "MissingTypeDescriptorError",
    "StubloomError",
    "UnknownTypeReferenceError",
    "StubGeneratorProtocol",
    "SyntaxCheckerProtocol",
]

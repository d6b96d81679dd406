import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Set

from stubloom.spec import (
    ClassDef,
    ComplexEnumDef,
    DescriptorRegistry,
    DuplicateVariableError,
    EnumDef,
    FunctionDef,
    MemberContainer,
    MemberDef,
    MethodDef,
    MissingTypeDescriptorError,
    Module,
    ModuleDocInfo,
    PyClassInfo,
    PyComplexEnumInfo,
    PyEnumInfo,
    PyFunctionInfo,
    PyMethodsInfo,
    PyVariableInfo,
    VariableDef,
)

log = logging.getLogger(__name__)


@dataclass
class StubInfo:
    """The finished module tree, keyed and ordered by module name."""

    modules: Dict[str, Module]
    python_root: Path

    def relative_path(self, name: str) -> Path:
        module = self.modules[name]
        parts = name.replace("-", "_").split(".")
        if module.submodules:
            return Path(*parts, "__init__.pyi")
        return Path(*parts[:-1], f"{parts[-1]}.pyi")

    def output_path(self, name: str) -> Path:
        return self.python_root / self.relative_path(name)


class StubInfoBuilder:
    """
    Turns a registry snapshot into a `StubInfo`.

    Shapes (classes, enums, functions, variables, module docs) are placed
    first; methods blocks are then joined onto their shape by identity key.
    """

    def __init__(self, default_module_name: str, python_root: Path):
        self.default_module_name = default_module_name
        self.python_root = python_root
        self._modules: Dict[str, Module] = {}

    def _get_module(self, name: Optional[str]) -> Module:
        name = name or self.default_module_name
        module = self._modules.get(name)
        if module is None:
            module = Module(name=name, default_module_name=self.default_module_name)
            self._modules[name] = module
        return module

    def add_class(self, info: PyClassInfo) -> None:
        self._get_module(info.module).classes[info.identity_key] = ClassDef.from_info(info)

    def add_complex_enum(self, info: PyComplexEnumInfo) -> None:
        self._get_module(info.module).classes[info.identity_key] = (
            ComplexEnumDef.from_info(info)
        )

    def add_enum(self, info: PyEnumInfo) -> None:
        self._get_module(info.module).enums[info.identity_key] = EnumDef.from_info(info)

    def add_function(self, info: PyFunctionInfo) -> None:
        functions = self._get_module(info.module).functions
        functions.setdefault(info.name, []).append(FunctionDef.from_info(info))

    def add_variable(self, info: PyVariableInfo) -> None:
        module = self._get_module(info.module)
        if info.name in module.variables:
            raise DuplicateVariableError(module.name, info.name)
        module.variables[info.name] = VariableDef.from_info(info)

    def add_module_doc(self, info: ModuleDocInfo) -> None:
        self._get_module(info.module).doc = info.doc()

    def _find_entity(self, info: PyMethodsInfo) -> MemberContainer:
        for module in self._modules.values():
            if info.identity_key in module.classes:
                return module.classes[info.identity_key]
            if info.identity_key in module.enums:
                return module.enums[info.identity_key]
        raise MissingTypeDescriptorError(info.identity_key)

    def add_methods(self, info: PyMethodsInfo) -> None:
        entity = self._find_entity(info)
        for attr in info.attrs:
            entity.add_attr(MemberDef.from_info(attr, allow_abstract=False))
        for getter in info.getters:
            entity.add_getter(MemberDef.from_info(getter))
        for setter in info.setters:
            entity.add_setter(MemberDef.from_info(setter))
        for method in info.methods:
            entity.add_method(MethodDef.from_info(method))

    def _register_submodules(self) -> None:
        children: Dict[str, Set[str]] = {}
        for name in self._modules:
            path = name.split(".")
            if len(path) < 2:
                continue
            children.setdefault(".".join(path[:-1]), set()).add(path[-1])

        for parent, names in children.items():
            module = self._modules.get(parent)
            if module is not None:
                module.submodules.update(names)

    def build(self, registry: DescriptorRegistry) -> StubInfo:
        # Shape pass
        for info in registry.classes:
            self.add_class(info)
        for info in registry.complex_enums:
            self.add_complex_enum(info)
        for info in registry.enums:
            self.add_enum(info)
        for info in registry.functions:
            self.add_function(info)
        for info in registry.variables:
            self.add_variable(info)
        for info in registry.module_docs:
            self.add_module_doc(info)

        # Behavior pass
        for info in registry.methods:
            self.add_methods(info)

        self._register_submodules()
        log.debug(f"Built stub tree with modules: {sorted(self._modules)}")

        return StubInfo(
            modules=dict(sorted(self._modules.items())),
            python_root=self.python_root,
        )


def build_stub_info(
    registry: DescriptorRegistry, default_module_name: str, python_root: Path
) -> StubInfo:
    return StubInfoBuilder(default_module_name, python_root).build(registry)

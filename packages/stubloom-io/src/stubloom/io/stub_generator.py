import json
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple, Union

from stubloom.common import bus
from stubloom.config import RenderConfig
from stubloom.needle import L
from stubloom.spec import (
    ClassDef,
    DeprecatedInfo,
    EnumDef,
    FunctionDef,
    GetterSetter,
    ImportRef,
    MemberContainer,
    MemberDef,
    MethodDef,
    MethodType,
    Module,
    Parameter,
    Parameters,
    RuleName,
    TypeIgnore,
    TypeInfo,
    VariableDef,
)

from .docstring import format_docstring

HEADER = (
    "# This file is automatically generated by stubloom\n"
    "# ruff: noqa: E501, F401"
)

_ABC = ImportRef.of_module("abc")
_ENUM = ImportRef.of_module("enum")
_TYPING = ImportRef.of_module("typing")
_TYPING_EXTENSIONS = ImportRef.of_module("typing_extensions")


def _declared_order(entity: Union[ClassDef, EnumDef]) -> Tuple[str, str]:
    # Identity keys break ties between entities sharing a declared name.
    return entity.name, repr(entity.identity_key)


@dataclass
class _RenderContext:
    module: Module
    imports: Set[ImportRef] = field(default_factory=set)


class StubGenerator:
    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config or RenderConfig()
        self._indent_str = " " * self.config.indent

    def generate(self, module: Module) -> str:
        ctx = _RenderContext(module)

        # The body is rendered first; it decides which imports are needed.
        body: List[str] = []

        if module.variables:
            body.append(
                "\n".join(
                    self._generate_variable(var, ctx)
                    for _, var in sorted(module.variables.items())
                )
            )

        for _, functions in sorted(module.functions.items()):
            overloaded = len(functions) > 1
            for func in functions:
                body.append(self._generate_function(func, overloaded, ctx))

        for cls in sorted(module.classes.values(), key=_declared_order):
            body.append(self._generate_class(cls, 0, ctx))

        for enum_def in sorted(module.enums.values(), key=_declared_order):
            body.append(self._generate_enum(enum_def, 0, ctx))

        blocks = [HEADER]
        if module.doc.strip():
            blocks.append(format_docstring(module.doc, ""))
        imports = self._generate_imports(ctx)
        if imports:
            blocks.append("\n".join(imports))
        blocks.extend(body)

        return "\n\n".join(blocks) + "\n"

    def _indent(self, level: int) -> str:
        return self._indent_str * level

    def _type(self, type_info: TypeInfo, ctx: _RenderContext) -> str:
        type_info = type_info.with_self(self.config.self_import.type_info())
        ctx.imports.update(type_info.imports)
        return type_info.name

    def _generate_imports(self, ctx: _RenderContext) -> List[str]:
        module = ctx.module
        module_imports: Set[str] = set()
        type_imports: Dict[str, Set[str]] = {}

        for ref in ctx.imports:
            name = ref.module or module.default_module_name
            if name == module.name:
                continue
            if ref.is_type_import:
                type_imports.setdefault(name, set()).add(ref.name)
            else:
                module_imports.add(name)

        lines = [f"import {name}" for name in sorted(module_imports)]
        for name, type_names in sorted(type_imports.items()):
            lines.append(f"from {name} import {', '.join(sorted(type_names))}")
        for submodule in sorted(module.submodules):
            lines.append(f"from . import {submodule}")
        return lines

    def _generate_variable(self, var: VariableDef, ctx: _RenderContext) -> str:
        return f"{var.name}: {self._type(var.type_info, ctx)}"

    def _generate_attribute(
        self, attr: MemberDef, level: int, ctx: _RenderContext
    ) -> List[str]:
        indent = self._indent(level)
        line = f"{indent}{attr.name}: {self._type(attr.type_info, ctx)}"
        if attr.default is not None:
            line += f" = {attr.default}"
        lines = [line]
        if attr.doc.strip():
            lines.append(format_docstring(attr.doc, indent))
        return lines

    def _generate_param(self, param: Parameter, ctx: _RenderContext) -> str:
        text = f"{param.name}: {self._type(param.type_info, ctx)}"
        default = param.render_default()
        if default is not None:
            text += f" = {default}"
        return text

    def _generate_params(self, params: Parameters, ctx: _RenderContext) -> str:
        parts = [self._generate_param(p, ctx) for p in params.positional_only]
        if params.positional_only:
            parts.append("/")

        parts.extend(self._generate_param(p, ctx) for p in params.positional_or_keyword)

        # A bare * only when keyword-only parameters have no *args to follow.
        if params.varargs is not None:
            parts.append(f"*{self._generate_param(params.varargs, ctx)}")
        elif params.keyword_only:
            parts.append("*")

        parts.extend(self._generate_param(p, ctx) for p in params.keyword_only)

        if params.varkw is not None:
            parts.append(f"**{self._generate_param(params.varkw, ctx)}")

        return ", ".join(parts)

    def _deprecated_decorator(
        self, deprecated: DeprecatedInfo, ctx: _RenderContext
    ) -> str:
        ctx.imports.add(_TYPING_EXTENSIONS)
        return f"typing_extensions.deprecated({json.dumps(deprecated.message)})"

    def _type_ignore_comment(self, type_ignore: Optional[TypeIgnore]) -> str:
        if type_ignore is None:
            return ""
        if not type_ignore.rules:
            return "  # type: ignore"

        names = []
        for rule in type_ignore.rules:
            parsed = RuleName.parse(rule)
            if parsed.is_custom:
                bus.warning(L.render.type_ignore.unknown_rule, rule=parsed.name)
            names.append(str(parsed))
        return f"  # type: ignore[{','.join(names)}]"

    def _generate_callable(
        self,
        name: str,
        params: str,
        return_type: str,
        doc: str,
        level: int,
        decorators: List[str],
        is_async: bool = False,
        type_ignore: Optional[TypeIgnore] = None,
    ) -> str:
        indent = self._indent(level)
        lines = [f"{indent}@{dec}" for dec in decorators]

        prefix = "async " if is_async else ""
        def_line = f"{indent}{prefix}def {name}({params}) -> {return_type}:"
        comment = self._type_ignore_comment(type_ignore)

        if doc.strip():
            lines.append(f"{def_line}{comment}")
            lines.append(format_docstring(doc, self._indent(level + 1)))
        else:
            lines.append(f"{def_line} ...{comment}")

        return "\n".join(lines)

    def _leading_decorators(
        self,
        overloaded: bool,
        deprecated: Optional[DeprecatedInfo],
        ctx: _RenderContext,
    ) -> List[str]:
        decorators = []
        if overloaded:
            ctx.imports.add(_TYPING)
            decorators.append("typing.overload")
        if deprecated is not None:
            decorators.append(self._deprecated_decorator(deprecated, ctx))
        return decorators

    def _generate_function(
        self, func: FunctionDef, overloaded: bool, ctx: _RenderContext
    ) -> str:
        return self._generate_callable(
            func.name,
            self._generate_params(func.parameters, ctx),
            self._type(func.return_type, ctx),
            func.doc,
            0,
            self._leading_decorators(overloaded, func.deprecated, ctx),
            is_async=func.is_async,
            type_ignore=func.type_ignore,
        )

    def _generate_method(
        self, method: MethodDef, overloaded: bool, level: int, ctx: _RenderContext
    ) -> str:
        decorators = self._leading_decorators(overloaded, method.deprecated, ctx)

        if method.method_type is MethodType.STATIC:
            decorators.append("staticmethod")
            receiver = None
        elif method.method_type is MethodType.CLASS:
            decorators.append("classmethod")
            receiver = "cls"
        elif method.method_type is MethodType.NEW:
            # Implicitly a classmethod; never decorated.
            receiver = "cls"
        else:
            receiver = "self"

        if method.is_abstract:
            ctx.imports.add(_ABC)
            decorators.append("abc.abstractmethod")

        params = self._generate_params(method.parameters, ctx)
        if receiver is not None:
            params = f"{receiver}, {params}" if params else receiver

        return self._generate_callable(
            method.name,
            params,
            self._type(method.return_type, ctx),
            method.doc,
            level,
            decorators,
            is_async=method.is_async,
            type_ignore=method.type_ignore,
        )

    def _generate_property(
        self, name: str, pair: GetterSetter, level: int, ctx: _RenderContext
    ) -> List[str]:
        blocks = []
        if pair.getter is not None:
            getter = pair.getter
            blocks.append(
                self._generate_callable(
                    name,
                    "self",
                    self._type(getter.type_info, ctx),
                    getter.doc,
                    level,
                    self._accessor_decorators(getter, "property", ctx),
                )
            )
        if pair.setter is not None:
            setter = pair.setter
            blocks.append(
                self._generate_callable(
                    name,
                    f"self, value: {self._type(setter.type_info, ctx)}",
                    "None",
                    setter.doc,
                    level,
                    self._accessor_decorators(setter, f"{name}.setter", ctx),
                )
            )
        return blocks

    def _accessor_decorators(
        self, member: MemberDef, kind: str, ctx: _RenderContext
    ) -> List[str]:
        decorators = self._leading_decorators(False, member.deprecated, ctx)
        decorators.append(kind)
        if member.is_abstract:
            ctx.imports.add(_ABC)
            decorators.append("abc.abstractmethod")
        return decorators

    def _generate_body(
        self,
        container: MemberContainer,
        head: List[str],
        level: int,
        ctx: _RenderContext,
        nested: Optional[List[ClassDef]] = None,
    ) -> List[str]:
        """Lines of a class body: `head` and attributes, then callables."""
        lines = list(head)
        for attr in container.attrs:
            lines.extend(self._generate_attribute(attr, level, ctx))

        blocks: List[str] = []
        for name, pair in sorted(container.getter_setters.items()):
            blocks.extend(self._generate_property(name, pair, level, ctx))
        for _, methods in sorted(container.methods.items()):
            overloaded = len(methods) > 1
            for method in methods:
                blocks.append(self._generate_method(method, overloaded, level, ctx))
        for cls in nested or []:
            blocks.append(self._generate_class(cls, level, ctx))

        if lines and blocks:
            lines.append("")
        for i, block in enumerate(blocks):
            lines.append(block)
            if i < len(blocks) - 1:
                lines.append("")

        if not lines:
            lines.append(f"{self._indent(level)}...")
        return lines

    def _generate_class(self, cls: ClassDef, level: int, ctx: _RenderContext) -> str:
        indent = self._indent(level)
        inner = self._indent(level + 1)

        bases = [self._type(base, ctx) for base in cls.bases]
        if cls.is_abstract and "abc.ABC" not in bases:
            ctx.imports.add(_ABC)
            bases.append("abc.ABC")
        bases_str = f"({', '.join(bases)})" if bases else ""

        head = []
        if cls.doc.strip():
            head.append(format_docstring(cls.doc, inner))
        if cls.match_args:
            head.append(f"{inner}__match_args__ = {tuple(cls.match_args)!r}")

        lines = [f"{indent}class {cls.name}{bases_str}:"]
        lines.extend(self._generate_body(cls, head, level + 1, ctx, nested=cls.classes))
        return "\n".join(lines)

    def _generate_enum(self, enum_def: EnumDef, level: int, ctx: _RenderContext) -> str:
        indent = self._indent(level)
        inner = self._indent(level + 1)
        ctx.imports.add(_ENUM)

        head = []
        if enum_def.doc.strip():
            head.append(format_docstring(enum_def.doc, inner))
        for name, doc in enum_def.variants:
            head.append(f"{inner}{name} = ...")
            if doc.strip():
                head.append(format_docstring(doc, inner))

        lines = [f"{indent}class {enum_def.name}(enum.Enum):"]
        lines.extend(self._generate_body(enum_def, head, level + 1, ctx))
        return "\n".join(lines)

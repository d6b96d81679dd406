from pathlib import Path

import pytest

from stubloom.config import StubloomConfig
from stubloom.needle import L
from stubloom.spec import DescriptorRegistry, ModuleDocInfo, PyFunctionInfo, TypeInfo
from stubloom.stubgen import generate_stubs
from stubloom.test_utils import SpyBus


class DeniedFileSystem:
    def __init__(self, deny: str):
        self.deny = deny
        self.written = []

    def write_text(self, path: Path, content: str) -> None:
        if path.name == self.deny:
            raise PermissionError(f"denied: {path}")
        self.written.append(path)


def _registry() -> DescriptorRegistry:
    registry = DescriptorRegistry()
    registry.submit(ModuleDocInfo("native", lambda: "Native module."))
    registry.submit(PyFunctionInfo("version", lambda: TypeInfo.builtin("str")))
    registry.submit(PyFunctionInfo("ping", TypeInfo.none, module="native.net"))
    return registry


def test_generate_stubs_writes_and_reports(tmp_path, monkeypatch):
    config = StubloomConfig(module_name="native", python_root=tmp_path)
    spy_bus = SpyBus()

    with spy_bus.patch(monkeypatch):
        paths = generate_stubs(_registry(), config)

    assert paths == [tmp_path / "native" / "__init__.pyi", tmp_path / "native" / "net.pyi"]
    assert "def version() -> builtins.str: ..." in paths[0].read_text(encoding="utf-8")
    assert "def ping() -> None: ..." in paths[1].read_text(encoding="utf-8")

    successes = [
        m["params"]["module"]
        for m in spy_bus.get_messages()
        if m["id"] == str(L.generate.file.success)
    ]
    assert successes == ["native", "native.net"]
    spy_bus.assert_id_called(L.generate.syntax.checked, level="debug")


def test_write_failure_propagates_and_keeps_earlier_files(tmp_path, monkeypatch):
    config = StubloomConfig(module_name="native", python_root=tmp_path, check_syntax=False)
    fs = DeniedFileSystem(deny="net.pyi")
    spy_bus = SpyBus()

    with spy_bus.patch(monkeypatch):
        with pytest.raises(PermissionError):
            generate_stubs(_registry(), config, fs=fs)

    assert fs.written == [tmp_path / "native" / "__init__.pyi"]
    ids = [m["id"] for m in spy_bus.get_messages()]
    assert str(L.generate.run.complete) not in ids
    assert str(L.generate.syntax.checked) not in ids

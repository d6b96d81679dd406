from typing import List, Optional
from pathlib import Path

from stubloom.common import bus
from stubloom.common.transaction import FileSystemAdapter, TransactionManager
from stubloom.config import StubloomConfig
from stubloom.io import StubGenerator, StubSyntaxChecker
from stubloom.needle import L
from stubloom.spec import DescriptorRegistry

from .builder import StubInfoBuilder
from .runners import GenerateRunner


def generate_stubs(
    registry: DescriptorRegistry,
    config: StubloomConfig,
    fs: Optional[FileSystemAdapter] = None,
) -> List[Path]:
    """
    Build, render and write the stubs for every module in `registry`.

    Filesystem errors propagate; files written before the failure remain.
    """
    stub_info = StubInfoBuilder(config.module_name, config.python_root).build(registry)

    runner = GenerateRunner(
        StubGenerator(config.render),
        StubSyntaxChecker() if config.check_syntax else None,
    )
    tm = TransactionManager(config.python_root, fs)
    generated_files = runner.run_batch(stub_info, tm)
    tm.commit()

    for name, path in zip(stub_info.modules, generated_files):
        bus.success(L.generate.file.success, module=name, path=path)
    bus.success(L.generate.run.complete, count=len(generated_files))
    return generated_files

from pathlib import Path
from typing import List, Optional

from stubloom.common import bus
from stubloom.common.transaction import TransactionManager
from stubloom.needle import L
from stubloom.spec import StubGeneratorProtocol, SyntaxCheckerProtocol

from .builder import StubInfo


class GenerateRunner:
    def __init__(
        self,
        generator: StubGeneratorProtocol,
        checker: Optional[SyntaxCheckerProtocol] = None,
    ):
        self.generator = generator
        self.checker = checker

    def run_batch(self, stub_info: StubInfo, tm: TransactionManager) -> List[Path]:
        """
        Render every module and queue its write on `tm`.

        Nothing is written here; a syntax failure in any module stops the
        batch before `tm.commit()` can run.
        """
        bus.info(
            L.generate.run.start,
            count=len(stub_info.modules),
            root=stub_info.python_root,
        )
        generated_files: List[Path] = []

        for name, module in stub_info.modules.items():
            content = self.generator.generate(module)

            if self.checker is not None:
                self.checker.check(content, name)
                bus.debug(L.generate.syntax.checked, module=name)

            relative_path = stub_info.relative_path(name)
            tm.add_write(relative_path, content)
            generated_files.append(stub_info.python_root / relative_path)

        return generated_files

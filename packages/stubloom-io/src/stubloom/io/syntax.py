import libcst

from stubloom.spec import StubloomError


class StubSyntaxError(StubloomError):
    def __init__(self, module_name: str, detail: str):
        self.module_name = module_name
        self.detail = detail
        super().__init__(f"Generated stub for '{module_name}' is not valid Python: {detail}")


class StubSyntaxChecker:
    """Rejects stub text that does not parse as a Python module."""

    def check(self, source: str, module_name: str) -> None:
        try:
            libcst.parse_module(source)
        except libcst.ParserSyntaxError as e:
            raise StubSyntaxError(module_name, str(e)) from e

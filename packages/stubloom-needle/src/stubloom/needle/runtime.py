import os
from pathlib import Path
from typing import Dict, List, Optional, Union

from .catalog import load_catalog
from .pointer import SemanticPointer

LANG_ENV_VAR = "STUBLOOM_LANG"
DEFAULT_LANG = "en"


def find_project_root(start_dir: Optional[Path] = None) -> Path:
    start = (start_dir or Path.cwd()).resolve()
    for candidate in (start, *start.parents):
        if (candidate / "pyproject.toml").is_file() or (candidate / ".git").is_dir():
            return candidate
    return start


class Needle:
    """
    Resolves message keys to templates.

    Each root contributes `<root>/needle/<lang>` and the project override
    directory `<root>/.stubloom/needle/<lang>`. Roots are merged in list order,
    so a root later in `roots` overrides an earlier one; `add_root()` puts
    packaged assets in front of the project root.
    """

    def __init__(self, roots: Optional[List[Path]] = None):
        self.roots: List[Path] = list(roots) if roots else [find_project_root()]
        self._tables: Dict[str, Dict[str, str]] = {}

    def add_root(self, path: Path) -> None:
        if path in self.roots:
            return
        self.roots.insert(0, path)
        self._tables.clear()

    def _table(self, lang: str) -> Dict[str, str]:
        table = self._tables.get(lang)
        if table is None:
            table = {}
            for root in self.roots:
                table.update(load_catalog(root / "needle" / lang))
                table.update(load_catalog(root / ".stubloom" / "needle" / lang))
            self._tables[lang] = table
        return table

    def get(
        self, pointer: Union[SemanticPointer, str], lang: Optional[str] = None
    ) -> str:
        """
        The template for `pointer` in `lang` (default: $STUBLOOM_LANG, then
        "en"), falling back to English and finally to the key itself.
        """
        key = str(pointer)
        target = lang or os.getenv(LANG_ENV_VAR, DEFAULT_LANG)

        for candidate in dict.fromkeys((target, DEFAULT_LANG)):
            template = self._table(candidate).get(key)
            if template is not None:
                return template
        return key


needle = Needle()

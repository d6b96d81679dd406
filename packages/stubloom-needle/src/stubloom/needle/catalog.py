import json
import logging
from pathlib import Path
from typing import Dict

log = logging.getLogger(__name__)


def load_catalog(directory: Path) -> Dict[str, str]:
    """
    Merge every `*.json` catalog under `directory` into one `{key: template}`
    table. Files are read in sorted path order; later files win.

    Unreadable files and files that are not a flat JSON object are skipped
    with a warning.
    """
    templates: Dict[str, str] = {}
    if not directory.is_dir():
        return templates

    for path in sorted(directory.rglob("*.json")):
        try:
            content = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            log.warning(f"Skipping unreadable message catalog {path}: {e}")
            continue
        if not isinstance(content, dict):
            log.warning(f"Skipping message catalog {path}: not a JSON object")
            continue
        templates.update((str(key), str(value)) for key, value in content.items())

    return templates

from pathlib import Path
from typing import Dict


def write_files(root: Path, files: Dict[str, str]) -> None:
    for name, content in files.items():
        (root / name).write_text(content, encoding="utf-8")

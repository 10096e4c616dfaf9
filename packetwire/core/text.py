from __future__ import annotations

from pathlib import Path
from typing import Union

from packetwire.core.errors import InputFileError


def read_all_text(path: Union[str, Path]) -> str:
    file_path = Path(path)
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputFileError(f"failed to open file '{file_path}': {exc}") from exc

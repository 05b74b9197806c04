from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union


def read_json(path: Union[str, Path]) -> Any:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    if path.suffix.lower() != ".json":
        raise ValueError(f"Unsupported file format: {path.suffix.lower()}")

    with path.open("r", encoding="utf-8") as f:
        return json.load(f)

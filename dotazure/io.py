from __future__ import annotations
import json
from pathlib import Path
from typing import Any

def read_json(p: Path) -> Any:
    """Read JSON file."""
    return json.loads(Path(p).read_text(encoding="utf-8"))

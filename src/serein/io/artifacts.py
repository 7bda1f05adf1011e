"""JSON/text artifact read/write.

Writer is stable: UTF-8, `indent=2`, key insertion order preserved,
newline-terminated. Preserving order matters: descriptors are loaded,
mutated in place and rewritten on switch, and a second identical switch must
produce byte-identical files.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from serein.core.errors import CorruptArtifact


def dumps_json(obj: Any) -> str:
    return json.dumps(obj, indent=2, ensure_ascii=False) + "\n"


def write_json(path: Path, obj: Any) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(dumps_json(obj), encoding="utf-8")


def write_text_exact(path: Path, text: str) -> None:
    # newline="" prevents Python from translating newlines on write
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8", newline="") as f:
        f.write(text)


def write_bytes(path: Path, data: bytes) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_bytes(bytes(data))


def read_json_object(path: Path) -> dict[str, Any]:
    """Read a JSON object from `path`.

    Raises:
        CorruptArtifact: file missing, unreadable, not JSON, or not an object.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise CorruptArtifact(p, "file not found") from e
    except (OSError, UnicodeDecodeError) as e:
        raise CorruptArtifact(p, f"cannot read: {e}") from e
    try:
        obj = json.loads(text)
    except json.JSONDecodeError as e:
        raise CorruptArtifact(p, f"invalid JSON: {e}") from e
    if not isinstance(obj, dict):
        raise CorruptArtifact(p, f"expected JSON object, got {type(obj).__name__}")
    return obj


__all__ = ["dumps_json", "read_json_object", "write_bytes", "write_json", "write_text_exact"]

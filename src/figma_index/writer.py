"""Writes the design index JSON document."""
import json
from pathlib import Path
from typing import Union

from .entries import DesignEntry


def render_index(entries: list[DesignEntry]) -> str:
    """Pretty-print entries as a JSON array with a trailing newline."""
    return json.dumps([e.to_dict() for e in entries], indent=2, ensure_ascii=False) + "\n"


def write_index(entries: list[DesignEntry], output_path: Union[str, Path]) -> int:
    """Overwrite output_path with the rendered index.
    
    Relative paths resolve against the current working directory.
    
    Returns:
        Number of entries written
    """
    out_path = Path(output_path).resolve()
    out_path.write_text(render_index(entries), encoding="utf-8")
    return len(entries)

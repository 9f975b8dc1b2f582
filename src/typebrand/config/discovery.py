"""Config file discovery and loading.

Walk-up finder locates the nearest pyproject.toml, similar to how git finds
.git/. Settings live in its ``[tool.typebrand]`` table. The TYPEBRAND_CONFIG
env var names a file explicitly.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "TYPEBRAND_CONFIG"
TOOL_TABLE = "typebrand"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for pyproject.toml.

    Returns the path to the config file, or None if not found.
    Checks TYPEBRAND_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def load_tool_table(path: Path) -> dict[str, Any]:
    """Return the ``[tool.typebrand]`` table of *path*, or ``{}`` if absent.

    Raises:
        ValueError: If *path* is not valid TOML, or ``tool`` or
            ``tool.typebrand`` is not a table.
    """
    raw = path.read_text(encoding="utf-8")
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ValueError(msg) from exc

    tool = data.get("tool", {})
    if not isinstance(tool, dict):
        msg = f"[tool] in {path} must be a table"
        raise ValueError(msg)

    table = tool.get(TOOL_TABLE, {})
    if not isinstance(table, dict):
        msg = f"[tool.{TOOL_TABLE}] in {path} must be a table"
        raise ValueError(msg)
    return table

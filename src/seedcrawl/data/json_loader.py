"""JSON reading for config files."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from .errors import ConfigLoadError, ConfigValidationError


def load_json(path: Path) -> object:
    """Parse a JSON file, mapping IO and syntax problems to ConfigLoadError."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigLoadError(f"Config file not found: {path}", path) from exc
    except OSError as exc:
        raise ConfigLoadError(f"Unable to read config file {path}: {exc}", path) from exc
    except UnicodeDecodeError as exc:
        raise ConfigLoadError(f"Config file {path} is not UTF-8 text: {exc}", path) from exc

    try:
        return json.loads(text)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise ConfigLoadError(f"Invalid JSON in {path}: {exc}", path) from exc


def load_json_object(path: Path) -> Dict[str, Any]:
    raw = load_json(path)
    if not isinstance(raw, dict):
        raise ConfigValidationError(f"Expected top-level object in {path}", path)
    return raw

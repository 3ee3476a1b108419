"""
Viewport config loading and validation.

Config format: {"viewports": [{"name": str, "width": int, "height": int}, ...]}.
List order is capture order. Entries are validated strictly so a bad file
fails before any browser is launched.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

from capture.errors import ConfigInvalid, ConfigNotFound, ConfigSchemaInvalid
from shared.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ViewportSpec:
    """A named width x height pair; `name` is used in output filenames."""

    name: str
    width: int
    height: int

    @property
    def size(self) -> dict[str, int]:
        return {"width": self.width, "height": self.height}

    def __str__(self) -> str:
        return f"{self.name} ({self.width}x{self.height})"


def _is_positive_int(value: Any) -> bool:
    # bool is an int subclass; `true` is not a width.
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def parse_viewport(entry: Any, index: int) -> ViewportSpec:
    """Validate one `viewports` entry and build a ViewportSpec."""
    if not isinstance(entry, dict):
        raise ConfigSchemaInvalid(f"viewports[{index}] must be an object")

    name = entry.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ConfigSchemaInvalid(f"viewports[{index}].name must be a non-empty string")

    for field in ("width", "height"):
        if not _is_positive_int(entry.get(field)):
            raise ConfigSchemaInvalid(
                f"viewports[{index}].{field} must be a positive integer, "
                f"got {entry.get(field)!r}"
            )

    return ViewportSpec(name=name.strip(), width=entry["width"], height=entry["height"])


def parse_viewport_config(document: Any) -> list[ViewportSpec]:
    """
    Validate a parsed config document and return its viewports in order.

    Raises ConfigSchemaInvalid when `viewports` is missing, not a list, empty,
    has a malformed entry, or repeats a name.
    """
    viewports_raw = document.get("viewports") if isinstance(document, dict) else None
    if not isinstance(viewports_raw, list):
        raise ConfigSchemaInvalid("Config file must contain a 'viewports' array")
    if not viewports_raw:
        raise ConfigSchemaInvalid("Config file 'viewports' array is empty")

    viewports: list[ViewportSpec] = []
    seen: set[str] = set()
    for index, entry in enumerate(viewports_raw):
        spec = parse_viewport(entry, index)
        if spec.name in seen:
            raise ConfigSchemaInvalid(f"viewports[{index}].name {spec.name!r} is not unique")
        seen.add(spec.name)
        viewports.append(spec)

    return viewports


def load_viewport_config(path: Union[str, Path]) -> list[ViewportSpec]:
    """
    Read and validate the viewport config file at `path`.

    Raises ConfigNotFound, ConfigInvalid or ConfigSchemaInvalid.
    """
    config_path = Path(path)
    if not config_path.is_file():
        raise ConfigNotFound(f'Config file "{config_path}" does not exist')

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            document = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigInvalid(f'Config file "{config_path}" is not valid JSON: {e}') from e
    except OSError as e:
        raise ConfigNotFound(f'Config file "{config_path}" could not be read: {e}') from e

    viewports = parse_viewport_config(document)
    logger.debug(
        "viewport_config.loaded",
        path=str(config_path),
        viewports=[v.name for v in viewports],
    )
    return viewports

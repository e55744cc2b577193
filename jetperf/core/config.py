"""Parameter file management for JetPerf.

Handles saving/loading analysis inputs as JSON. A parameter file holds
project metadata and one complete ParameterSet:

    {
      "meta": {"name": "...", ...},
      "parameters": {"mach": 0.85, "ambient_pressure": "22.632 kPa", ...}
    }

Parameter values may be plain SI numbers or unit-bearing strings.
A file without a "parameters" key is read as a flat parameter mapping.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path

from jetperf import __version__
from jetperf.core.params import ParameterSet

logger = logging.getLogger(__name__)


# --- Project metadata ---


@dataclass
class ProjectMeta:
    """Top-level project metadata."""

    name: str = "Untitled"
    description: str = ""
    author: str = ""
    version: str = __version__
    created: str = ""
    modified: str = ""

    def touch(self) -> None:
        """Update the modified timestamp."""
        now = datetime.now(timezone.utc).isoformat()
        if not self.created:
            self.created = now
        self.modified = now


# --- JSON serialization ---


def save_parameters_json(
    params: ParameterSet, path: str | Path, meta: ProjectMeta | None = None
) -> None:
    """Save a parameter set (and metadata) to a JSON file."""
    path = Path(path)
    meta = meta or ProjectMeta()
    meta.touch()

    data = {"meta": asdict(meta), "parameters": params.to_dict()}
    with open(path, "w") as f:
        json.dump(data, f, indent=2)

    logger.info("Saved parameters to %s", path)


def load_project_json(path: str | Path) -> tuple[ProjectMeta, ParameterSet]:
    """Load metadata and parameters from a JSON file.

    Raises:
        InputsNotInitializedError: If any parameter is missing.
        ValueError: If the file is not a JSON object or holds bad values.
    """
    path = Path(path)
    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object")

    if "parameters" in data:
        meta = ProjectMeta(**data.get("meta", {}))
        raw = data["parameters"]
    else:
        meta = ProjectMeta(name=path.stem)
        raw = data

    params = ParameterSet.from_dict(raw)
    logger.info("Loaded parameters from %s", path)
    return meta, params


def load_parameters_json(path: str | Path) -> ParameterSet:
    """Load only the ParameterSet from a JSON file."""
    return load_project_json(path)[1]

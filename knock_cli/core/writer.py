"""Writes fetched resources into local resource directories."""

import json
import logging
from pathlib import Path
from typing import Any, Dict

from knock_cli.core.resource_dir import ResourceDirContext

logger = logging.getLogger(__name__)


def write_resource_dir(context: ResourceDirContext, data: Dict[str, Any]) -> Path:
    """Create or update a resource directory from API data.

    The resource is stored as pretty-printed JSON in the type's marker file,
    which is what makes the directory recognizable as a resource directory.

    Args:
        context: Target resource directory
        data: Resource payload returned by the API

    Returns:
        Path of the written marker file
    """
    context.abspath.mkdir(parents=True, exist_ok=True)
    marker_path = context.abspath / context.type.marker_name
    marker_path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")

    logger.info(f"Wrote {context.type.value} `{context.key}` to {marker_path}")
    return marker_path

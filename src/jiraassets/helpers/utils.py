import json
import os
from typing import Any, Optional

import yaml

from jiraassets.helpers.logger import get_logger

logger = get_logger(__name__)


def load_json_data(json_str: Optional[str] = None, json_file: Optional[str] = None) -> Any:
    """
    Load input data from a JSON string or from a JSON/YAML file.

    :param json_str: Inline JSON document.
    :param json_file: Path to a .json, .yaml or .yml file.
    :return: The parsed document.
    :raises ValueError: If neither source is given or the content cannot be parsed.
    """
    if json_str:
        try:
            return json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON input: {e}") from e

    if json_file:
        if not os.path.exists(json_file):
            raise ValueError(f"Input file not found: {json_file}")
        with open(json_file, "r", encoding="utf-8") as f:
            content = f.read()
        try:
            if json_file.endswith((".yaml", ".yml")):
                return yaml.safe_load(content)
            return json.loads(content)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ValueError(f"Invalid content in {json_file}: {e}") from e

    raise ValueError("Either a JSON string or a file path must be provided.")


def load_json_or_path(value: Optional[str]) -> Optional[dict[str, Any]]:
    """Treat value as a file path when it exists on disk, otherwise as inline JSON."""
    if not value:
        return None
    if os.path.exists(value):
        logger.debug("Loading document from file", path=value)
        return load_json_data(json_file=value)
    return load_json_data(json_str=value)

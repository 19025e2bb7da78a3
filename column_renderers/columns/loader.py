"""Load column definitions from JSON or YAML files."""

import json
import logging
from pathlib import Path
from typing import Union

import yaml

from .schemas import ColumnDefinition

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def load_columns(path: Union[str, Path]) -> list[ColumnDefinition]:
    """Load column definitions from a file.

    The file holds either a list of columns or a mapping with a
    "columns" list.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the content is not a list of column definitions.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Column definitions not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        if path.suffix.lower() in YAML_SUFFIXES:
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    if isinstance(data, dict):
        data = data.get("columns")
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of columns in {path}")

    columns = [ColumnDefinition.model_validate(c) for c in data]
    logger.info(f"Loaded {len(columns)} column definitions from {path}")
    return columns

"""
MockServer Client Common Utilities

Loading expectation definitions from JSON or YAML files.
"""

import json
import logging
from pathlib import Path
from typing import List, Dict, Any

import yaml

from ..models import Expectation

logger = logging.getLogger("mockserver_client.loader")

YAML_SUFFIXES = ('.yaml', '.yml')


class ExpectationLoader:
    """
    Loader for expectation definition files.

    Handles the formats MockServer initialization files use:
    - Format 1: {"expectations": [...]}  (wrapped format)
    - Format 2: [...]                    (direct list format)

    Files ending in .yaml/.yml are read with PyYAML, everything else as JSON.
    Each entry uses the same camelCase shape that is PUT to MockServer.

    Example:
        loader = ExpectationLoader("expectations.yaml")
        for expectation in loader.load():
            client.create_expectation(expectation)
    """

    def __init__(self, file_path: str):
        """
        Initialize expectation loader.

        Args:
            file_path: Path to expectation file
        """
        self.file_path = Path(file_path)

    def load_raw(self) -> List[Dict[str, Any]]:
        """
        Load expectation dictionaries without converting them.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the top-level structure is unrecognized
        """
        if not self.file_path.exists():
            raise FileNotFoundError(f"Expectation file not found: {self.file_path}")

        with open(self.file_path, 'r', encoding='utf-8') as f:
            if self.file_path.suffix.lower() in YAML_SUFFIXES:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)

        if isinstance(data, dict):
            if 'expectations' in data:
                entries = data['expectations']
            else:
                raise ValueError(
                    f"Unexpected format in {self.file_path}. "
                    f"Expected dict with 'expectations' key, or a list of expectations. "
                    f"Found keys: {list(data.keys())}"
                )
        elif isinstance(data, list):
            entries = data
        else:
            raise ValueError(
                f"Unexpected format in {self.file_path}. "
                f"Expected dict or list, got {type(data).__name__}"
            )

        if not isinstance(entries, list):
            raise ValueError(f"'expectations' in {self.file_path} must be a list")

        return entries

    def load(self) -> List[Expectation]:
        """
        Load and convert expectations.

        Returns:
            List of Expectation objects, in file order

        Raises:
            SerializationError: If an entry lacks a required key
        """
        expectations = [Expectation.from_dict(entry) for entry in self.load_raw()]
        logger.info(f"Loaded {len(expectations)} expectations from {self.file_path}")
        return expectations

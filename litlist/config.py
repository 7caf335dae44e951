#!/usr/bin/env python3
"""
YAML configuration for the adaptation search

Keys (all optional):
  database_path: path to literature.list
  encoding:      text encoding of the database (default cp1252)
  output_path:   CSV report path (default output/adaptations.csv)
  full_parse:    parse every entry type, not just the book-like ones
"""

import logging
from pathlib import Path
from typing import Dict

import yaml

from litlist.constants import DEFAULT_ENCODING

logger = logging.getLogger(__name__)

DEFAULTS = {
    'database_path': None,
    'encoding': DEFAULT_ENCODING,
    'output_path': 'output/adaptations.csv',
    'full_parse': False,
}


def load_config(config_path: Path) -> Dict:
    """Load configuration from YAML file, filling in defaults for missing keys"""
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        loaded = yaml.safe_load(f) or {}

    if not isinstance(loaded, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    unknown = set(loaded) - set(DEFAULTS)
    if unknown:
        logger.warning(f"Ignoring unknown config keys: {', '.join(sorted(unknown))}")

    config = dict(DEFAULTS)
    config.update({k: v for k, v in loaded.items() if k in DEFAULTS})
    return config

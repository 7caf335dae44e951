#!/usr/bin/env python3
"""
Tag grouper - splits one record into its TAG: lines

Every non-blank line is split at its first colon. The left side must be one
of the known Tag values (case-sensitive); anything else, including
continuation lines without a colon, is dropped without error.
"""

import logging
from typing import Dict, List

from litlist.constants import Tag

logger = logging.getLogger(__name__)

_KNOWN_TAGS = {t.value: t for t in Tag}


def group_entries(text: str) -> Dict[Tag, List[str]]:
    """
    Group the value text of each tagged line under its Tag

    Args:
        text: Raw record text (one movie block)

    Returns:
        Mapping of Tag to value strings in file order. Tags that do not
        occur in the record are absent from the mapping.
    """
    entries: Dict[Tag, List[str]] = {}

    for line in text.split('\n'):
        line = line.strip()
        if not line:
            continue

        key, sep, value = line.partition(':')
        if not sep:
            continue

        tag = _KNOWN_TAGS.get(key.strip())
        if tag is None:
            logger.debug(f"Ignoring unknown entry tag: {key.strip()!r}")
            continue

        entries.setdefault(tag, []).append(value.strip())

    return entries

"""Composite resource IDs of the form ``<project_id>:<group_id>``."""

from __future__ import annotations

import logging

from gl_share.errors import DecodeError

ID_SEPARATOR = ":"

logger = logging.getLogger("gl-share")


def build_two_part_id(first: str, second: str) -> str:
    return f"{first}{ID_SEPARATOR}{second}"


def parse_two_part_id(resource_id: str) -> tuple[str, str]:
    """Split a composite ID into its two parts."""
    parts = resource_id.split(ID_SEPARATOR)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise DecodeError(f"unexpected ID format ({resource_id!r}), expected <project_id>{ID_SEPARATOR}<group_id>")
    return parts[0], parts[1]


def project_and_group_from_id(resource_id: str) -> tuple[str, int]:
    """Decode a share ID into (project_id, group_id)."""
    try:
        project_id, group_part = parse_two_part_id(resource_id)
        # int() alone would accept "+7", " 7" and "7_0"
        if not (group_part.isascii() and group_part.isdigit()):
            raise DecodeError(f"group ID in {resource_id!r} is not an integer")
        group_id = int(group_part)
    except DecodeError:
        logger.warning(f"Cannot get project and group ID from input: {resource_id}")
        raise
    return project_id, group_id

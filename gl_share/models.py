"""Data models and constants for gl-share."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from gl_share.errors import DecodeError, ValidationError
from gl_share.ids import build_two_part_id

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

DEFAULT_GITLAB_URL = "https://gitlab.com"
API_V4 = "/api/v4"

# Retry configuration (opt-in: by default a transient failure surfaces immediately)
DEFAULT_MAX_RETRIES = 0
RETRY_BACKOFF_FACTOR = 0.5  # seconds
RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}

# GitLab access level constants
ACCESS_LEVELS = MappingProxyType(
    {
        "no_access": 0,
        "minimal": 5,
        "guest": 10,
        "planner": 15,
        "reporter": 20,
        "developer": 30,
        "maintainer": 40,
        "owner": 50,
    }
)

ACCESS_LEVEL_NAMES = MappingProxyType({code: name for name, code in ACCESS_LEVELS.items()})

# A group cannot be given owner access to a project
ACCEPTED_ACCESS_LEVELS = tuple(name for name in ACCESS_LEVELS if name != "owner")


# ---------------------------------------------------------------------------
# Access level conversion
# ---------------------------------------------------------------------------


def access_level_code(name: str) -> int:
    """Translate a symbolic access level ("developer") to its API code (30)."""
    try:
        return ACCESS_LEVELS[name]
    except KeyError:
        raise ValidationError(
            f"unknown access level {name!r}, expected one of: {', '.join(ACCESS_LEVELS)}"
        ) from None


def to_access_level_value(raw: Any) -> int:
    """
    Convert a raw ``group_access_level`` from the API into an access level code.

    The API returns the level as a JSON number, which is the same value domain
    as the codes in ACCESS_LEVELS. Integral strings are accepted; booleans and
    fractional numbers are rejected rather than truncated.
    """
    if isinstance(raw, bool):
        raise DecodeError(f"invalid access level value: {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            pass
    raise DecodeError(f"invalid access level value: {raw!r}")


def access_level_name(code: int) -> str:
    """Translate an access level code back to its symbolic name."""
    try:
        return ACCESS_LEVEL_NAMES[code]
    except KeyError:
        raise DecodeError(f"unknown access level code: {code}") from None


# ---------------------------------------------------------------------------
# Data Classes
# ---------------------------------------------------------------------------


@dataclass
class ShareBinding:
    """A group's access to a project."""

    project_id: str
    group_id: int
    access_level: str

    @property
    def id(self) -> str:
        return build_two_part_id(self.project_id, str(self.group_id))


@dataclass
class ActionResult:
    """Result of a single lifecycle command."""

    resource_id: str
    operation: str
    action: str  # "created", "refreshed", "updated", "deleted", "imported", "not_found", "error"
    detail: str = ""

    def to_dict(self) -> dict:
        return {
            "resource_id": self.resource_id,
            "operation": self.operation,
            "action": self.action,
            "detail": self.detail,
        }

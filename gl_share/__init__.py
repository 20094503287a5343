"""
gl-share: Manage sharing of GitLab projects with groups.

Exposes a project group share resource with create/read/update/delete/import
lifecycle functions, and a CLI that runs one lifecycle step at a time.

Environment:
    GITLAB_TOKEN - GitLab Personal Access Token (required)
    GITLAB_URL   - GitLab instance URL (default: https://gitlab.com)
"""

from gl_share.cli import main
from gl_share.client import GitLabClient
from gl_share.errors import DecodeError, GlShareError, ValidationError
from gl_share.ids import build_two_part_id, parse_two_part_id, project_and_group_from_id
from gl_share.models import (
    ACCEPTED_ACCESS_LEVELS,
    ACCESS_LEVELS,
    DEFAULT_MAX_RETRIES,
    RETRY_BACKOFF_FACTOR,
    RETRYABLE_STATUS_CODES,
    ActionResult,
    ShareBinding,
    access_level_code,
    access_level_name,
    to_access_level_value,
)
from gl_share.resource import ProjectShareGroupResource
from gl_share.schema import ResourceData

__version__ = "0.1.0"
__all__ = [
    "main",
    "__version__",
    "GitLabClient",
    "ProjectShareGroupResource",
    "ResourceData",
    "ShareBinding",
    "ActionResult",
    "GlShareError",
    "ValidationError",
    "DecodeError",
    "ACCESS_LEVELS",
    "ACCEPTED_ACCESS_LEVELS",
    "DEFAULT_MAX_RETRIES",
    "RETRY_BACKOFF_FACTOR",
    "RETRYABLE_STATUS_CODES",
    "access_level_code",
    "access_level_name",
    "to_access_level_value",
    "build_two_part_id",
    "parse_two_part_id",
    "project_and_group_from_id",
]

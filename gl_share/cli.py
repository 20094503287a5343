"""CLI entry point for gl-share."""

from __future__ import annotations

import argparse
import json
import os
import sys

# Ensure all operations are registered by importing the operations package
import gl_share.operations  # noqa: F401
from gl_share.client import GitLabClient
from gl_share.logging_utils import setup_logging
from gl_share.models import DEFAULT_GITLAB_URL, DEFAULT_MAX_RETRIES
from gl_share.operations import get_operation_registry
from gl_share.resource import ProjectShareGroupResource


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gl-share",
        description="Share GitLab projects with groups, one lifecycle step at a time.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Each command prints the resulting share state as JSON on stdout.

Environment:
    GITLAB_TOKEN - GitLab Personal Access Token (required)
    GITLAB_URL   - GitLab instance URL (default: https://gitlab.com)

Examples:
    # Give group 7 developer access to a project
    gl-share create myorg/myproject 7 --access-level developer

    # Refresh the share state from GitLab
    gl-share read myorg/myproject:7

    # Raise the group to maintainer
    gl-share update myorg/myproject:7 --access-level maintainer

    # Revoke the share
    gl-share delete myorg/myproject:7
""",
    )
    parser.add_argument(
        "--json", action="store_true", dest="json_output", help="Output results as JSON lines (to stderr)"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--gitlab-url", default=None, help="GitLab instance URL (default: from GITLAB_URL env or https://gitlab.com)"
    )
    parser.add_argument(
        "--max-retries",
        type=int,
        default=DEFAULT_MAX_RETRIES,
        help=f"Maximum retry attempts for transient errors (default: {DEFAULT_MAX_RETRIES})",
    )

    subparsers = parser.add_subparsers(dest="operation", required=True, help="Lifecycle step to run")

    registry = get_operation_registry()
    for name, op_cls in sorted(registry.items()):
        sub = subparsers.add_parser(name, help=op_cls.__doc__)
        op_cls.add_arguments(sub)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Resolve GitLab URL
    gitlab_url = args.gitlab_url or os.environ.get("GITLAB_URL", DEFAULT_GITLAB_URL)

    # Get token
    token = os.environ.get("GITLAB_TOKEN")
    if not token:
        print("ERROR: GITLAB_TOKEN environment variable is not set.", file=sys.stderr)
        return 1

    logger = setup_logging(json_mode=args.json_output, verbose=args.verbose)

    client = GitLabClient(base_url=gitlab_url, token=token, max_retries=args.max_retries)
    resource = ProjectShareGroupResource(client)

    registry = get_operation_registry()
    operation = registry[args.operation](resource=resource, args=args)

    try:
        result = operation.run()
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130

    if result.action == "error":
        return 1

    if args.operation != "delete":
        print(json.dumps(operation.state(), sort_keys=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())

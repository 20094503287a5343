"""Base class and registry for lifecycle commands."""

from __future__ import annotations

import argparse
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from gl_share.models import ActionResult

if TYPE_CHECKING:
    from gl_share.resource import ProjectShareGroupResource
    from gl_share.schema import ResourceData

# ---------------------------------------------------------------------------
# Operation Registry
# ---------------------------------------------------------------------------

_operation_registry: dict[str, type[Operation]] = {}


def register_operation(name: str):
    """Decorator to register an operation class under a CLI subcommand name."""

    def decorator(cls):
        _operation_registry[name] = cls
        cls.operation_name = name
        return cls

    return decorator


def get_operation_registry() -> dict[str, type[Operation]]:
    """Get the operation registry."""
    return _operation_registry


# ---------------------------------------------------------------------------
# Operation Base Class
# ---------------------------------------------------------------------------


class Operation(ABC):
    """Base class for all lifecycle commands."""

    operation_name: str = ""

    def __init__(self, resource: ProjectShareGroupResource, args: argparse.Namespace):
        self.resource = resource
        self.args = args
        self.logger = logging.getLogger("gl-share")
        self.results: list[ActionResult] = []
        self.data: ResourceData | None = None

    @staticmethod
    @abstractmethod
    def add_arguments(parser: argparse.ArgumentParser) -> None:
        """Add operation-specific CLI arguments."""
        ...

    @abstractmethod
    def run(self) -> ActionResult:
        """Run this lifecycle step. Errors propagate to the caller."""
        ...

    def state(self) -> dict:
        """State left behind by run(), empty when the share is gone."""
        return self.data.state() if self.data is not None else {}

    def _record(self, result: ActionResult) -> ActionResult:
        self.results.append(result)
        icon = {
            "created": "+",
            "updated": "~",
            "refreshed": "·",
            "imported": "←",
            "deleted": "-",
            "not_found": "?",
            "error": "✗",
        }.get(result.action, "?")

        handler = self.logger.handlers[0] if self.logger.handlers else None
        if handler and getattr(handler.formatter, "json_mode", False):
            # Structured logger emits the result itself as a JSON line
            record = self.logger.makeRecord("gl-share", logging.INFO, "", 0, "", (), None)
            record.action_result = result
            self.logger.handle(record)
        else:
            self.logger.info(
                f"{icon} {result.resource_id}: {result.operation} → {result.action}"
                f"{' (' + result.detail + ')' if result.detail else ''}"
            )
        return result

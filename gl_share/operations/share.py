"""Lifecycle commands for project group shares."""

from __future__ import annotations

import argparse

import requests

from gl_share.errors import GlShareError
from gl_share.ids import build_two_part_id, project_and_group_from_id
from gl_share.models import ACCEPTED_ACCESS_LEVELS, ActionResult
from gl_share.operations.base import Operation, register_operation
from gl_share.schema import ResourceData

FAILURES = (GlShareError, requests.RequestException)


def _add_access_level(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--access-level",
        required=True,
        help=f"Access level granted to the group ({', '.join(ACCEPTED_ACCESS_LEVELS)})",
    )


def _add_resource_id(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("resource_id", help="Share ID in the form <project_id>:<group_id>")


@register_operation("create")
class CreateOperation(Operation):
    """Share a project with a group."""

    @staticmethod
    def add_arguments(parser: argparse.ArgumentParser) -> None:
        parser.add_argument("project_id", help="Project ID or full path (e.g. 'myorg/myproject')")
        parser.add_argument("group_id", type=int, help="Numeric ID of the group to share with")
        _add_access_level(parser)

    def run(self) -> ActionResult:
        resource_id = build_two_part_id(self.args.project_id, str(self.args.group_id))
        self.data = ResourceData(
            config={
                "project_id": self.args.project_id,
                "group_id": self.args.group_id,
                "access_level": self.args.access_level,
            }
        )
        try:
            self.resource.create(self.data)
        except FAILURES as e:
            return self._record(ActionResult(resource_id, self.operation_name, "error", str(e)))

        return self._record(
            ActionResult(self.data.id, self.operation_name, "created", f"access_level={self.data.get('access_level')}")
        )


@register_operation("read")
class ReadOperation(Operation):
    """Refresh a share from GitLab."""

    @staticmethod
    def add_arguments(parser: argparse.ArgumentParser) -> None:
        _add_resource_id(parser)

    def run(self) -> ActionResult:
        resource_id = self.args.resource_id
        self.data = ResourceData(state={"id": resource_id})
        try:
            found = self.resource.read(self.data)
        except FAILURES as e:
            return self._record(ActionResult(resource_id, self.operation_name, "error", str(e)))

        if not found:
            return self._record(ActionResult(resource_id, self.operation_name, "not_found", "group has no share"))
        return self._record(
            ActionResult(resource_id, self.operation_name, "refreshed", f"access_level={self.data.get('access_level')}")
        )


@register_operation("update")
class UpdateOperation(Operation):
    """Change the access level of an existing share."""

    @staticmethod
    def add_arguments(parser: argparse.ArgumentParser) -> None:
        _add_resource_id(parser)
        _add_access_level(parser)

    def run(self) -> ActionResult:
        resource_id = self.args.resource_id
        try:
            project_id, group_id = project_and_group_from_id(resource_id)
            self.data = ResourceData(
                state={"id": resource_id},
                config={"project_id": project_id, "group_id": group_id, "access_level": self.args.access_level},
            )
            found = self.resource.update(self.data)
        except FAILURES as e:
            return self._record(ActionResult(resource_id, self.operation_name, "error", str(e)))

        if not found:
            return self._record(ActionResult(resource_id, self.operation_name, "not_found", "group has no share"))
        return self._record(
            ActionResult(resource_id, self.operation_name, "updated", f"access_level={self.data.get('access_level')}")
        )


@register_operation("delete")
class DeleteOperation(Operation):
    """Revoke a group's access to a project."""

    @staticmethod
    def add_arguments(parser: argparse.ArgumentParser) -> None:
        _add_resource_id(parser)

    def run(self) -> ActionResult:
        resource_id = self.args.resource_id
        self.data = ResourceData(state={"id": resource_id})
        try:
            self.resource.delete(self.data)
        except FAILURES as e:
            return self._record(ActionResult(resource_id, self.operation_name, "error", str(e)))

        return self._record(ActionResult(resource_id, self.operation_name, "deleted"))


@register_operation("import")
class ImportOperation(Operation):
    """Import an existing share by ID."""

    @staticmethod
    def add_arguments(parser: argparse.ArgumentParser) -> None:
        _add_resource_id(parser)

    def run(self) -> ActionResult:
        resource_id = self.args.resource_id
        try:
            self.data = self.resource.import_state(resource_id)
        except FAILURES as e:
            return self._record(ActionResult(resource_id, self.operation_name, "error", str(e)))

        if self.data.get("access_level") is None:
            return self._record(ActionResult(resource_id, self.operation_name, "not_found", "group has no share"))
        return self._record(
            ActionResult(resource_id, self.operation_name, "imported", f"access_level={self.data.get('access_level')}")
        )

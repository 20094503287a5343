"""The project group share resource: shares a GitLab project with a group."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gl_share.errors import ValidationError
from gl_share.ids import build_two_part_id, project_and_group_from_id
from gl_share.models import (
    ACCEPTED_ACCESS_LEVELS,
    ShareBinding,
    access_level_code,
    access_level_name,
    to_access_level_value,
)
from gl_share.schema import ResourceData, SchemaField, SchemaType, validate_config, validate_value_func

if TYPE_CHECKING:
    from gl_share.client import GitLabClient

SCHEMA: dict[str, SchemaField] = {
    "project_id": SchemaField(type=SchemaType.STRING, required=True, force_new=True),
    "group_id": SchemaField(type=SchemaType.INT, required=True, force_new=True),
    "access_level": SchemaField(
        type=SchemaType.STRING,
        required=True,
        validate=validate_value_func(ACCEPTED_ACCESS_LEVELS),
    ),
}


class ProjectShareGroupResource:
    """Grants a group access to a project at a given access level."""

    schema = SCHEMA

    def __init__(self, client: GitLabClient):
        self.client = client
        self.logger = logging.getLogger("gl-share")

    def create(self, d: ResourceData) -> None:
        validate_config(self.schema, d.config)

        group_id = d.get("group_id")
        project_id = d.get("project_id")
        group_access = access_level_code(d.get("access_level"))

        self.logger.debug(f"Create gitlab project share for group {group_id} in {project_id}")
        self.client.share_project_with_group(project_id, group_id, group_access)

        d.set_id(build_two_part_id(project_id, str(group_id)))
        self.read(d)

    def read(self, d: ResourceData) -> bool:
        """Refresh ``d`` from the project's shares. Returns False if the group has no share."""
        self.logger.debug(f"Read gitlab project share {d.id}")
        project_id, group_id = project_and_group_from_id(d.id)

        project = self.client.get_project(project_id)

        for shared in project.get("shared_with_groups") or []:
            if shared.get("group_id") == group_id:
                self._set_to_state(d, shared, project_id)
                return True

        self.logger.warning(f"Group {group_id} not found in shares of project {project_id}, leaving state unchanged")
        return False

    def update(self, d: ResourceData) -> bool:
        validate_config(self.schema, d.config)
        for key, field in self.schema.items():
            if field.force_new and d.has_change(key):
                raise ValidationError(f"{key}: cannot be changed in place, the share must be replaced")

        group_id = d.get("group_id")
        project_id = d.get("project_id")
        group_access = access_level_code(d.get("access_level"))

        self.logger.debug(f"Update gitlab project share for group {group_id} in {project_id}")
        self.client.share_project_with_group(project_id, group_id, group_access)

        return self.read(d)

    def delete(self, d: ResourceData) -> None:
        project_id, group_id = project_and_group_from_id(d.id)

        self.logger.debug(f"Delete gitlab project share for group {group_id} in {project_id}")
        self.client.delete_shared_project_from_group(project_id, group_id)
        d.set_id("")

    def import_state(self, resource_id: str) -> ResourceData:
        """Import an existing share by its ``<project_id>:<group_id>`` ID."""
        d = ResourceData(state={"id": resource_id})
        self.read(d)
        return d

    @staticmethod
    def _set_to_state(d: ResourceData, shared: dict, project_id: str) -> None:
        # group_access_level comes back as a plain number; decode it into the
        # same code domain used when sharing before the reverse lookup
        binding = ShareBinding(
            project_id=project_id,
            group_id=shared["group_id"],
            access_level=access_level_name(to_access_level_value(shared.get("group_access_level"))),
        )
        d.set("project_id", binding.project_id)
        d.set("group_id", binding.group_id)
        d.set("access_level", binding.access_level)
        d.set_id(binding.id)

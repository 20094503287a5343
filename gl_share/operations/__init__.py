"""Lifecycle commands for gl-share."""

from gl_share.operations.base import Operation, get_operation_registry, register_operation

# Import all operations to register them
from gl_share.operations.share import (
    CreateOperation,
    DeleteOperation,
    ImportOperation,
    ReadOperation,
    UpdateOperation,
)

__all__ = [
    "Operation",
    "register_operation",
    "get_operation_registry",
    "CreateOperation",
    "ReadOperation",
    "UpdateOperation",
    "DeleteOperation",
    "ImportOperation",
]

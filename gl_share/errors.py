"""Exceptions raised by gl-share."""

from __future__ import annotations


class GlShareError(Exception):
    """Base class for gl-share errors."""


class ValidationError(GlShareError):
    """Resource configuration was rejected before any API call was made."""


class DecodeError(GlShareError):
    """A composite ID or an API value could not be decoded."""

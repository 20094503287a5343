"""GitLab API client for project group shares, with retry support."""

from __future__ import annotations

import logging
import time
import urllib.parse
from typing import Any

import requests

from gl_share.models import (
    API_V4,
    DEFAULT_MAX_RETRIES,
    RETRY_BACKOFF_FACTOR,
    RETRYABLE_STATUS_CODES,
)


class GitLabClient:
    """Thin wrapper around GitLab REST API v4 with retry logic."""

    def __init__(self, base_url: str, token: str, max_retries: int = DEFAULT_MAX_RETRIES):
        self.base_url = base_url.rstrip("/")
        self.api_url = f"{self.base_url}{API_V4}"
        self.session = requests.Session()
        self.session.headers.update(
            {
                "PRIVATE-TOKEN": token,
                "Content-Type": "application/json",
            }
        )
        self.max_retries = max_retries
        self.logger = logging.getLogger("gl-share")

    def _request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        """Make an HTTP request with retry logic for transient failures."""
        url = f"{self.api_url}{endpoint}"

        for attempt in range(self.max_retries + 1):
            try:
                self.logger.debug(
                    f"{method.upper()} {url} {kwargs.get('params', '')} {kwargs.get('json', '')} "
                    f"(attempt {attempt + 1}/{self.max_retries + 1})"
                )
                resp = self.session.request(method, url, **kwargs)

                # Retry on rate limit or server errors
                if resp.status_code in RETRYABLE_STATUS_CODES and attempt < self.max_retries:
                    wait_time = self._calculate_backoff(resp, attempt)
                    self.logger.warning(f"Retryable error {resp.status_code}, waiting {wait_time:.1f}s before retry")
                    time.sleep(wait_time)
                    continue

                if resp.status_code >= 400:
                    self.logger.error(f"API error {resp.status_code}: {resp.text[:500]}")
                resp.raise_for_status()
                return resp

            except requests.exceptions.ConnectionError as e:
                if attempt < self.max_retries:
                    wait_time = RETRY_BACKOFF_FACTOR * (2**attempt)
                    self.logger.warning(f"Connection error, retrying in {wait_time:.1f}s: {e}")
                    time.sleep(wait_time)
                    continue
                raise

        raise RuntimeError("Unexpected retry loop exit")

    def _calculate_backoff(self, resp: requests.Response, attempt: int) -> float:
        """Calculate backoff time, respecting Retry-After header for 429s."""
        if resp.status_code == 429:
            retry_after = resp.headers.get("Retry-After")
            if retry_after:
                try:
                    return float(retry_after)
                except ValueError:
                    pass  # Fall through to exponential backoff
        return RETRY_BACKOFF_FACTOR * (2**attempt)

    def get(self, endpoint: str, params: dict | None = None) -> Any:
        return self._request("GET", endpoint, params=params).json()

    def post(self, endpoint: str, data: dict | None = None) -> Any:
        return self._request("POST", endpoint, json=data).json()

    def delete(self, endpoint: str, params: dict | None = None) -> requests.Response:
        return self._request("DELETE", endpoint, params=params)

    # -- Project sharing --

    @staticmethod
    def _project_endpoint(project_id: str | int) -> str:
        """Endpoint for a project given its numeric ID or its namespace path."""
        return f"/projects/{urllib.parse.quote(str(project_id), safe='')}"

    def share_project_with_group(self, project_id: str | int, group_id: int, group_access: int) -> dict:
        """Share a project with a group at the given access level code."""
        return self.post(
            f"{self._project_endpoint(project_id)}/share",
            data={"group_id": group_id, "group_access": group_access},
        )

    def get_project(self, project_id: str | int) -> dict:
        """Get project details by ID or path."""
        return self.get(self._project_endpoint(project_id))

    def delete_shared_project_from_group(self, project_id: str | int, group_id: int) -> None:
        """Revoke a group's access to a project."""
        self.delete(f"{self._project_endpoint(project_id)}/share/{group_id}")

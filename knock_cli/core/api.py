"""HTTP client for the Knock management API."""

import logging
from typing import Any, Dict, List, Optional

import requests

from knock_cli import __version__
from knock_cli.core.config import DEFAULT_API_ORIGIN

logger = logging.getLogger(__name__)

API_VERSION = "v1"
DEFAULT_TIMEOUT = 30


class ApiError(Exception):
    """Raised when the management API returns an error or cannot be reached."""

    def __init__(self, status: Optional[int], message: str):
        self.status = status
        self.message = message
        detail = f"{message} (status: {status})" if status is not None else message
        super().__init__(detail)


def prune(params: Dict[str, Any]) -> Dict[str, Any]:
    """Drop query params that were not provided."""
    return {k: v for k, v in params.items() if v is not None}


class ApiClient:
    """Thin wrapper over requests for the v1 management endpoints.

    Attributes:
        api_origin: Base URL of the management API
        session: requests session carrying auth headers
    """

    def __init__(
        self,
        service_token: str,
        api_origin: str = DEFAULT_API_ORIGIN,
        session: Optional[requests.Session] = None,
    ):
        self.api_origin = api_origin.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {service_token}",
                "User-Agent": f"knock-cli/{__version__}",
            }
        )

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Raises:
            ApiError: On transport failure or a non-2xx response
        """
        url = f"{self.api_origin}/{API_VERSION}{path}"
        logger.debug(f"{method} {url} params={params}")

        try:
            resp = self.session.request(
                method, url, params=prune(params or {}), json=json, timeout=DEFAULT_TIMEOUT
            )
        except requests.RequestException as e:
            raise ApiError(None, f"Failed to reach {self.api_origin}: {e}") from e

        if not resp.ok:
            raise ApiError(resp.status_code, self._error_message(resp))

        if not resp.content:
            return None
        return resp.json()

    @staticmethod
    def _error_message(resp: requests.Response) -> str:
        try:
            body = resp.json()
        except ValueError:
            return resp.text or resp.reason or "Unknown error"

        if isinstance(body, dict) and body.get("message"):
            return body["message"]
        return resp.reason or "Unknown error"

    def whoami(self) -> Dict[str, Any]:
        return self._request("GET", "/whoami")

    # Environments

    def list_environments(
        self, after: Optional[str] = None, limit: Optional[int] = None
    ) -> Dict[str, Any]:
        return self._request("GET", "/environments", params={"after": after, "limit": limit})

    def list_all_environments(self) -> List[Dict[str, Any]]:
        """Follow page cursors until every environment has been fetched."""
        environments: List[Dict[str, Any]] = []
        after = None
        while True:
            resp = self.list_environments(after=after, limit=100)
            environments.extend(resp.get("entries", []))
            after = (resp.get("page_info") or {}).get("after")
            if not after:
                return environments

    # Branches

    def list_branches(
        self,
        environment: str = "development",
        after: Optional[str] = None,
        before: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Dict[str, Any]:
        params = {"environment": environment, "after": after, "before": before, "limit": limit}
        return self._request("GET", "/branches", params=params)

    def get_branch(self, slug: str) -> Dict[str, Any]:
        return self._request("GET", f"/branches/{slug}")

    def create_branch(self, slug: str) -> Dict[str, Any]:
        return self._request("POST", f"/branches/{slug}")

    def delete_branch(self, slug: str) -> None:
        self._request("DELETE", f"/branches/{slug}")

    # Workflows

    def list_workflows(
        self,
        environment: str,
        branch: Optional[str] = None,
        after: Optional[str] = None,
        before: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Dict[str, Any]:
        params = {
            "environment": environment,
            "branch": branch,
            "after": after,
            "before": before,
            "limit": limit,
        }
        return self._request("GET", "/workflows", params=params)

    def get_workflow(
        self, key: str, environment: str, branch: Optional[str] = None
    ) -> Dict[str, Any]:
        params = {"environment": environment, "branch": branch}
        return self._request("GET", f"/workflows/{key}", params=params)

    # Layouts

    def list_layouts(
        self,
        environment: str,
        branch: Optional[str] = None,
        after: Optional[str] = None,
        before: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Dict[str, Any]:
        params = {
            "environment": environment,
            "branch": branch,
            "after": after,
            "before": before,
            "limit": limit,
        }
        return self._request("GET", "/email_layouts", params=params)

    def get_layout(
        self, key: str, environment: str, branch: Optional[str] = None
    ) -> Dict[str, Any]:
        params = {"environment": environment, "branch": branch}
        return self._request("GET", f"/email_layouts/{key}", params=params)

    # Commits

    def list_commits(
        self,
        environment: str,
        branch: Optional[str] = None,
        promoted: Optional[bool] = None,
        resource_types: Optional[List[str]] = None,
        resource_id: Optional[str] = None,
        after: Optional[str] = None,
        before: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Dict[str, Any]:
        params = {
            "environment": environment,
            "branch": branch,
            "promoted": None if promoted is None else str(promoted).lower(),
            "resource_type": resource_types or None,
            "resource_id": resource_id,
            "after": after,
            "before": before,
            "limit": limit,
        }
        return self._request("GET", "/commits", params=params)

    def get_commit(self, commit_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/commits/{commit_id}")

    def promote_all_changes(self, to_environment: str) -> Dict[str, Any]:
        return self._request(
            "PUT", "/commits/promote", params={"to_environment": to_environment}
        )

    def promote_one_change(self, commit_id: str) -> Dict[str, Any]:
        return self._request("PUT", f"/commits/{commit_id}/promote")

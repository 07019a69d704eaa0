"""Production GitHub implementation using the REST API over httpx."""

import logging

import httpx

from sprout.core.config import DEFAULT_API_URL
from sprout.core.errors import ApiError, NetworkError
from sprout.core.github.abc import GitHub
from sprout.core.github.types import (
    NO_TOKEN_REASON,
    RepoAlreadyExists,
    RepoCreated,
    RepoCreationFailed,
    RepoCreationOutcome,
    RepoCreationSkipped,
)

logger = logging.getLogger(__name__)

HTTP_UNPROCESSABLE_ENTITY = 422


class RealGitHub(GitHub):
    """Creates repositories with `POST /user/repos`.

    A single request is sent per call, synchronously, with httpx's default
    timeouts.
    """

    def __init__(self, api_url: str = DEFAULT_API_URL, client: httpx.Client | None = None) -> None:
        """Create RealGitHub.

        Args:
            api_url: Base URL of the REST API
            client: Optional pre-built client (tests pass one with a MockTransport).
                    When None, a short-lived client is opened per request.
        """
        self._api_url = api_url.rstrip("/")
        self._client = client

    def create_repo(self, owner: str, repo_name: str, token: str | None) -> RepoCreationOutcome:
        if token is None or not token.strip():
            return RepoCreationSkipped(reason=NO_TOKEN_REASON)

        try:
            response = self._post_create(repo_name, token.strip())
        except NetworkError as e:
            logger.debug("GitHub unreachable: %s", e)
            return RepoCreationFailed(status=None, body=str(e))
        except ApiError as e:
            logger.debug("%s", e)
            return RepoCreationFailed(status=e.status, body=e.body)

        if response.status_code == HTTP_UNPROCESSABLE_ENTITY:
            return RepoAlreadyExists(owner=owner, repo_name=repo_name)
        return RepoCreated(owner=owner, repo_name=repo_name)

    def _post_create(self, repo_name: str, token: str) -> httpx.Response:
        """Send the create request.

        Returns:
            The response, when it is a success or a 422

        Raises:
            NetworkError: If GitHub cannot be reached
            ApiError: For any other status
        """
        url = f"{self._api_url}/user/repos"
        payload = {"name": repo_name, "private": False, "auto_init": False}
        headers = {
            "Authorization": f"token {token}",
            "Accept": "application/vnd.github+json",
            "User-Agent": "sprout",
        }
        logger.debug("POST %s name=%s", url, repo_name)

        try:
            if self._client is not None:
                response = self._client.post(url, json=payload, headers=headers)
            else:
                with httpx.Client() as client:
                    response = client.post(url, json=payload, headers=headers)
        except httpx.HTTPError as e:
            raise NetworkError(f"Failed to connect to GitHub: {e}") from e

        if not response.is_success and response.status_code != HTTP_UNPROCESSABLE_ENTITY:
            raise ApiError(response.status_code, response.text)
        return response

"""
GitHub API client handle for hubclient.

This module provides the object every resource shares for talking to the
GitHub REST API: base URL, credentials, and the single-shot request
method the typed dispatcher and all resource methods build on.
"""

import logging
import os
from typing import Any, Dict, Optional

import requests

from hubclient.api.dispatcher import GitHubDispatchMethods
from hubclient.api.github_api_methods import GitHubApiMethods
from hubclient.api.token_manager import TokenManager
from hubclient.core.constants import (
    API_URL_ENV_VAR,
    GITHUB_API_BASE,
    GITHUB_API_VERSION,
    GITHUB_MEDIA_TYPE,
    REQUEST_TIMEOUT,
    USER_AGENT,
)
from hubclient.core.errors import ApiError, DecodeError, TransportError

# Configure module logger
logger = logging.getLogger(__name__)


class GitHubAPI(GitHubDispatchMethods, GitHubApiMethods):
    """
    GitHub API client handle.

    One instance is created per process and shared, never owned, by every
    resource object it returns. Host and credentials are fixed at
    construction. Calls share one ``requests.Session``, so they share its
    connection pool and cookie jar; each call is still its own round trip.

    Attributes:
        base_url: API root, without a trailing slash
        token_manager: Holder of the bearer credential
        timeout: Per-request timeout in seconds
        headers: HTTP headers sent with every request
        session: Persistent session for making HTTP requests
    """

    def __init__(
        self,
        token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = REQUEST_TIMEOUT,
    ):
        """
        Initialize the GitHub API client.

        Args:
            token: GitHub personal access token (or set GITHUB_TOKEN env var).
                   Without one, only anonymous endpoints are usable.
            base_url: API root, e.g. a GitHub Enterprise ``https://host/api/v3``
                      (or set GITHUB_API_URL env var)
            timeout: Seconds to wait for the server before giving up
        """
        self.token_manager = TokenManager(token)
        self.base_url = (base_url or os.environ.get(API_URL_ENV_VAR) or GITHUB_API_BASE).rstrip("/")
        self.timeout = timeout

        # Set up headers for REST API requests
        self.headers = {
            "Accept": GITHUB_MEDIA_TYPE,
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
            "User-Agent": USER_AGENT,
        }
        self.headers.update(self.token_manager.auth_headers())

        # Create persistent session for better performance
        self.session = requests.Session()
        self.session.headers.update(self.headers)

        logger.debug(
            f"GitHub API client initialized for {self.base_url} "
            f"({'anonymous' if self.token_manager.is_anonymous else 'authenticated'})"
        )

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict] = None,
        data: Optional[Dict] = None,
    ) -> Optional[Any]:
        """
        Make exactly one request to the GitHub REST API.

        There are no retries and no pagination: the response to this single
        call is the whole result.

        Args:
            method: HTTP method ("GET" or "POST")
            path: Expanded API path, appended to the base URL
            params: URL query parameters
            data: JSON request body

        Returns:
            The decoded JSON body, or None if the resource is absent
            (404) or the body is empty

        Raises:
            TransportError: If the request could not be completed
            ApiError: If GitHub answered with any other error status
            DecodeError: If the body is not valid JSON
        """
        url = f"{self.base_url}{path}"

        try:
            response = self.session.request(
                method, url, params=params, json=data, timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            logger.debug(f"Transport failure for {method} {url}: {e}")
            raise TransportError(f"{method} {url} failed: {e}") from e

        logger.debug(f"{method} {url} -> {response.status_code}")

        if response.status_code == 404:
            logger.debug(f"Resource not found (404): {url}")
            return None

        if response.status_code >= 400:
            raise ApiError(response.status_code, self._error_message(response), url)

        if response.status_code == 204 or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(f"Response from {method} {url} is not valid JSON: {e}") from e

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        """Pull GitHub's ``message`` out of an error body, falling back to the raw text."""
        try:
            body = response.json()
        except ValueError:
            return response.text
        if isinstance(body, dict) and "message" in body:
            return str(body["message"])
        return response.text

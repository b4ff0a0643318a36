"""Credential handling for GitHub API requests."""

import logging
import os
from typing import Dict, Optional

from hubclient.core.constants import TOKEN_ENV_VAR

logger = logging.getLogger(__name__)


class TokenManager:
    """
    Holds the bearer token attached to every request.

    The token is fixed at construction. Without one the client is anonymous
    and only endpoints that accept anonymous access will succeed.

    Attributes:
        token: The GitHub token, or None for anonymous access
    """

    def __init__(self, token: Optional[str] = None):
        """
        Initialize the token manager.

        Args:
            token: GitHub personal access token. Falls back to the
                   GITHUB_TOKEN environment variable when not given.
        """
        if token and token.strip():
            self.token = token.strip()
        else:
            self.token = self._get_token_from_env()

        logger.debug(
            f"Token manager initialized ({'authenticated' if self.token else 'anonymous'})"
        )

    def _get_token_from_env(self) -> Optional[str]:
        """Get GitHub token from environment variables."""
        token = os.environ.get(TOKEN_ENV_VAR)
        if token and token.strip():
            return token.strip()
        return None

    @property
    def is_anonymous(self) -> bool:
        return self.token is None

    def auth_headers(self) -> Dict[str, str]:
        """Headers carrying the credential, empty when anonymous."""
        if self.token is None:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

"""Top-level lookups available directly on the client handle."""

import logging
from typing import List, Optional

from hubclient.api.url_template import build_path
from hubclient.core.constants import (
    CURRENT_USER_PATH,
    CURRENT_USER_REPOS_PATH,
    ORG_PATH,
    ORG_REPOS_PATH,
    REPO_PATH,
    SEARCH_REPOS_PATH,
    USER_PATH,
    USER_REPOS_PATH,
)
from hubclient.models.repository import Repository
from hubclient.models.user import Organization, User

logger = logging.getLogger(__name__)


class GitHubApiMethods:
    """
    Entry points that do not start from an existing resource.

    Mixed into GitHubAPI; relies on its ``fetch_one`` / ``fetch_list``.
    """

    def get_repository(self, owner: str, name: str) -> Optional[Repository]:
        """
        Get a repository from the single-item endpoint.

        Args:
            owner: Repository owner (user or organization)
            name: Repository name

        Returns:
            Repository: A detailed repository, or None if it does not exist
        """
        logger.info(f"Fetching repository data for {owner}/{name}")
        path = build_path(REPO_PATH, {"owner": owner, "repo": name})
        return self.fetch_one(Repository, path, detailed=True)

    def get_repositories(self, username: str) -> Optional[List[Repository]]:
        """
        List public repositories of a user.

        Args:
            username: Login of the user

        Returns:
            List[Repository]: Summary repositories
        """
        logger.debug(f"Fetching repositories of {username}")
        return self.fetch_list(Repository, build_path(USER_REPOS_PATH, {"user": username}))

    def get_current_user_repositories(self) -> Optional[List[Repository]]:
        """List repositories the authenticated user can access, as summaries."""
        return self.fetch_list(Repository, CURRENT_USER_REPOS_PATH)

    def get_organization_repositories(self, org: str) -> Optional[List[Repository]]:
        """
        List repositories of an organization.

        Args:
            org: Organization login

        Returns:
            List[Repository]: Summary repositories
        """
        logger.debug(f"Fetching repositories of organization {org}")
        return self.fetch_list(Repository, build_path(ORG_REPOS_PATH, {"org": org}))

    def search_repositories(self, query: str) -> Optional[List[Repository]]:
        """
        Search repositories (first page of results only).

        Args:
            query: GitHub search syntax, e.g. ``language:python stars:>100``

        Returns:
            List[Repository]: Matching summary repositories, best match first
        """
        logger.debug(f"Searching repositories: {query}")
        return self.fetch_list(
            Repository, SEARCH_REPOS_PATH, params={"q": query}, items_key="items"
        )

    def get_organization(self, org: str) -> Optional[Organization]:
        """Get an organization by login, or None if it does not exist."""
        return self.fetch_one(Organization, build_path(ORG_PATH, {"org": org}))

    def get_user(self, login: str) -> Optional[User]:
        """Get a user by login, or None if it does not exist."""
        return self.fetch_one(User, build_path(USER_PATH, {"user": login}))

    def get_current_user(self) -> Optional[User]:
        """
        Get the authenticated user.

        Returns:
            User: The user owning the token, or None when the client is anonymous
        """
        if self.token_manager.is_anonymous:
            logger.debug("No token configured; there is no current user")
            return None
        return self.fetch_one(User, CURRENT_USER_PATH)

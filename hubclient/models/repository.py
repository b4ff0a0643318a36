"""Repository resource and its follow-up calls."""

import datetime
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from hubclient.api.url_template import build_path
from hubclient.core.constants import (
    REPO_BRANCHES_PATH,
    REPO_FORKS_PATH,
    REPO_ISSUES_PATH,
    REPO_PATH,
    REPO_PULL_PATH,
    REPO_PULLS_PATH,
    REPO_REF_PATH,
)
from hubclient.core.errors import UnsupportedOnSummary
from hubclient.models.base import Resource
from hubclient.models.branch import Branch
from hubclient.models.issue import Issue
from hubclient.models.pull_request import PullRequest
from hubclient.models.reference import Ref
from hubclient.models.user import Organization, User
from hubclient.utils.date_utils import parse_timestamp

if TYPE_CHECKING:
    from hubclient.api.github_api import GitHubAPI

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Repository(Resource):
    """
    A GitHub repository.

    Repositories come in two states. Those returned by the single-item
    endpoint (``GET /repos/{owner}/{repo}``) are *detailed*: every field is
    populated and ``parent`` can be read. Those returned by any list endpoint
    are *summaries*, and reading ``parent`` on them raises
    UnsupportedOnSummary. ``refresh()`` fetches a new, detailed copy.

    Two repositories are equal when owner login and name match.
    """

    name: str
    owner: User
    full_name: Optional[str] = field(default=None, compare=False)
    description: Optional[str] = field(default=None, compare=False)
    homepage: Optional[str] = field(default=None, compare=False)
    default_branch: Optional[str] = field(default=None, compare=False)
    fork: bool = field(default=False, compare=False)
    forks: int = field(default=0, compare=False)
    private: bool = field(default=False, compare=False)
    organization: Optional[Organization] = field(default=None, compare=False)
    html_url: Optional[str] = field(default=None, compare=False)
    # git://github.com/{user}/{repo}.git
    git_url: Optional[str] = field(default=None, compare=False)
    # git@github.com:{user}/{repo}.git
    ssh_url: Optional[str] = field(default=None, compare=False)
    # https://github.com/{user}/{repo}.git
    clone_url: Optional[str] = field(default=None, compare=False)
    created_at: Optional[datetime.datetime] = field(default=None, compare=False)
    updated_at: Optional[datetime.datetime] = field(default=None, compare=False)
    detailed: bool = field(default=False, compare=False)
    _parent: Optional["Repository"] = field(default=None, repr=False, compare=False)
    _api: Optional["GitHubAPI"] = field(default=None, repr=False, compare=False)

    @classmethod
    def _from_json(
        cls, data: Dict, api: Optional["GitHubAPI"], detailed: bool = False, **context: Any
    ) -> "Repository":
        parent = data.get("parent")
        organization = data.get("organization")
        return cls(
            name=data["name"],
            owner=User.from_dict(data["owner"], api=api),
            full_name=data.get("full_name"),
            description=data.get("description"),
            homepage=data.get("homepage"),
            default_branch=data.get("default_branch"),
            fork=bool(data.get("fork", False)),
            forks=int(data.get("forks_count", data.get("forks", 0)) or 0),
            private=bool(data.get("private", False)),
            organization=Organization.from_dict(organization, api=api) if organization else None,
            html_url=data.get("html_url"),
            git_url=data.get("git_url"),
            ssh_url=data.get("ssh_url"),
            clone_url=data.get("clone_url"),
            created_at=parse_timestamp(data.get("created_at")),
            updated_at=parse_timestamp(data.get("updated_at")),
            detailed=detailed,
            # Nested repositories are summaries, whatever endpoint they came from
            _parent=cls.from_dict(parent, api=api) if parent else None,
            _api=api,
        )

    @property
    def owner_login(self) -> str:
        return self.owner.login

    @property
    def parent(self) -> Optional["Repository"]:
        """
        The repository this one was forked from, or None if it is not a fork.

        Raises:
            UnsupportedOnSummary: If this object came from a list endpoint,
                                  where GitHub does not include the parent
        """
        if not self.detailed:
            raise UnsupportedOnSummary(
                f"Parent of {self} is unknown on a summary repository; call refresh() first"
            )
        return self._parent

    def _path(self, template: str, **segments: Any) -> str:
        return build_path(template, {"owner": self.owner_login, "repo": self.name, **segments})

    def refresh(self) -> Optional["Repository"]:
        """
        Fetch this repository again from the single-item endpoint.

        Returns:
            Repository: A new, detailed object, or None if it no longer exists
        """
        return self._require_api().fetch_one(Repository, self._path(REPO_PATH), detailed=True)

    def create_fork(self) -> Optional["Repository"]:
        """
        Fork this repository into the authenticated user's account.

        Returns:
            Repository: The new fork, as a summary
        """
        logger.info(f"Forking {self}")
        return self._require_api().create(Repository, self._path(REPO_FORKS_PATH), {})

    def get_branches(self) -> Optional[List[Branch]]:
        """
        List the branches of this repository (first page only).

        Returns:
            List[Branch]: Branches in the order GitHub returned them
        """
        return self._require_api().fetch_list(
            Branch, self._path(REPO_BRANCHES_PATH), repository=self
        )

    def get_default_branch(self) -> Optional[str]:
        """
        Look up the name of the default branch.

        Returns:
            str: The default branch name, or None if the repository is gone
        """
        repo = self.refresh()
        return None if repo is None else repo.default_branch

    def get_pull_requests(self) -> Optional[List[PullRequest]]:
        """
        List open pull requests (first page only).

        Returns:
            List[PullRequest]: Pull requests, each pointing back at this repository
        """
        return self._require_api().fetch_list(
            PullRequest, self._path(REPO_PULLS_PATH), repository=self
        )

    def get_pull_request(self, number: int) -> Optional[PullRequest]:
        """
        Get a single pull request.

        Args:
            number: Pull request number

        Returns:
            PullRequest: The pull request, or None if it does not exist
        """
        return self._require_api().fetch_one(
            PullRequest, self._path(REPO_PULL_PATH, pull=str(number)), repository=self
        )

    def create_pull_request(
        self, head: str, base: str, title: str, body: str
    ) -> Optional[PullRequest]:
        """
        Open a new pull request.

        Args:
            head: Branch with the changes, e.g. ``octocat:new-feature``
            base: Branch to merge into, e.g. ``main``
            title: Title of the pull request
            body: Description

        Returns:
            PullRequest: The created pull request
        """
        payload = {"title": title, "body": body, "head": head, "base": base}
        logger.info(f"Creating pull request {head} -> {base} on {self}")
        return self._require_api().create(
            PullRequest, self._path(REPO_PULLS_PATH), payload, repository=self
        )

    def get_ref(self, ref_name: str) -> Optional[Ref]:
        """
        Get a git reference.

        Args:
            ref_name: Reference without the ``refs/`` prefix, e.g. ``heads/main``

        Returns:
            Ref: The reference, or None if it does not exist
        """
        return self._require_api().fetch_one(
            Ref, self._path(REPO_REF_PATH, ref=ref_name), repository=self
        )

    def create_issue(self, title: str, body: str) -> Optional[Issue]:
        """
        Open a new issue.

        Args:
            title: Issue title
            body: Issue body

        Returns:
            Issue: The created issue
        """
        return self._require_api().create(
            Issue, self._path(REPO_ISSUES_PATH), {"title": title, "body": body}, repository=self
        )

    def __str__(self) -> str:
        return f"{self.owner_login}/{self.name}"

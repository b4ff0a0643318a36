"""Pull request resource."""

import datetime
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from hubclient.api.url_template import build_path
from hubclient.core.constants import REPO_ISSUE_PATH
from hubclient.models.comment import Commentable, IssueComment
from hubclient.models.issue import Issue
from hubclient.models.user import User
from hubclient.utils.date_utils import parse_timestamp

if TYPE_CHECKING:
    from hubclient.api.github_api import GitHubAPI
    from hubclient.models.repository import Repository


@dataclass(frozen=True)
class PullRequestBranch:
    """One side (head or base) of a pull request."""

    ref: str
    sha: Optional[str] = None
    label: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict) -> "PullRequestBranch":
        return cls(ref=data["ref"], sha=data.get("sha"), label=data.get("label"))


@dataclass(frozen=True)
class PullRequest(Commentable):
    """A pull request, identified by its number within its repository."""

    number: int
    title: Optional[str] = field(default=None, compare=False)
    body: Optional[str] = field(default=None, compare=False)
    state: Optional[str] = field(default=None, compare=False)
    user: Optional[User] = field(default=None, compare=False)
    head: Optional[PullRequestBranch] = field(default=None, compare=False)
    base: Optional[PullRequestBranch] = field(default=None, compare=False)
    merged: bool = field(default=False, compare=False)
    html_url: Optional[str] = field(default=None, compare=False)
    created_at: Optional[datetime.datetime] = field(default=None, compare=False)
    updated_at: Optional[datetime.datetime] = field(default=None, compare=False)
    merged_at: Optional[datetime.datetime] = field(default=None, compare=False)
    repository: Optional["Repository"] = field(default=None, repr=False)
    _api: Optional["GitHubAPI"] = field(default=None, repr=False, compare=False)

    @classmethod
    def _from_json(
        cls,
        data: Dict,
        api: Optional["GitHubAPI"],
        repository: Optional["Repository"] = None,
        **context: Any,
    ) -> "PullRequest":
        user = data.get("user")
        head = data.get("head")
        base = data.get("base")
        return cls(
            number=int(data["number"]),
            title=data.get("title"),
            body=data.get("body"),
            state=data.get("state"),
            user=User.from_dict(user, api=api) if user else None,
            head=PullRequestBranch.from_dict(head) if head else None,
            base=PullRequestBranch.from_dict(base) if base else None,
            # List responses omit "merged"; merged_at is always present
            merged=bool(data.get("merged", data.get("merged_at"))),
            html_url=data.get("html_url"),
            created_at=parse_timestamp(data.get("created_at")),
            updated_at=parse_timestamp(data.get("updated_at")),
            merged_at=parse_timestamp(data.get("merged_at")),
            repository=repository,
            _api=api,
        )

    def get_issue_comments(self) -> Optional[List[IssueComment]]:
        """List the conversation comments of this pull request."""
        return self.get_comments()

    def to_issue(self) -> Optional[Issue]:
        """
        Fetch the issue that backs this pull request.

        Every pull request is also an issue with the same number; labels,
        assignees and milestones live there.

        Returns:
            Issue: The issue, pointing at the same repository
        """
        api = self._require_api()
        repo = self.repository
        path = build_path(
            REPO_ISSUE_PATH,
            {
                "owner": repo.owner_login if repo else None,
                "repo": repo.name if repo else None,
                "number": self.number,
            },
        )
        return api.fetch_one(Issue, path, repository=repo)

    def __str__(self) -> str:
        return f"{self.repository or '?'}#{self.number}"

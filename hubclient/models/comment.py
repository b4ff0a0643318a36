"""Issue comments, shared by issues and pull requests."""

import datetime
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from hubclient.api.url_template import build_path
from hubclient.core.constants import REPO_ISSUE_COMMENTS_PATH
from hubclient.models.base import Resource
from hubclient.models.user import User
from hubclient.utils.date_utils import parse_timestamp

if TYPE_CHECKING:
    from hubclient.api.github_api import GitHubAPI


@dataclass(frozen=True)
class IssueComment(Resource):
    """A comment on an issue or pull request. Equal by comment id."""

    id: int
    body: Optional[str] = field(default=None, compare=False)
    user: Optional[User] = field(default=None, compare=False)
    html_url: Optional[str] = field(default=None, compare=False)
    created_at: Optional[datetime.datetime] = field(default=None, compare=False)
    parent: Optional[Resource] = field(default=None, repr=False, compare=False)
    _api: Optional["GitHubAPI"] = field(default=None, repr=False, compare=False)

    @classmethod
    def _from_json(
        cls,
        data: Dict,
        api: Optional["GitHubAPI"],
        parent: Optional[Resource] = None,
        **context: Any,
    ) -> "IssueComment":
        user = data.get("user")
        return cls(
            id=int(data["id"]),
            body=data.get("body"),
            user=User.from_dict(user, api=api) if user else None,
            html_url=data.get("html_url"),
            created_at=parse_timestamp(data.get("created_at")),
            parent=parent,
            _api=api,
        )


class Commentable(Resource):
    """Comment calls for resources addressed by repository and issue number."""

    def _comments_path(self) -> str:
        repo = self.repository
        return build_path(
            REPO_ISSUE_COMMENTS_PATH,
            {
                "owner": repo.owner_login if repo else None,
                "repo": repo.name if repo else None,
                "number": self.number,
            },
        )

    def get_comments(self) -> Optional[List[IssueComment]]:
        """
        List comments in conversation order (first page only).

        Returns:
            List[IssueComment]: Comments, each pointing back at this object
        """
        api = self._require_api()
        return api.fetch_list(IssueComment, self._comments_path(), parent=self)

    def create_comment(self, body: str) -> Optional[IssueComment]:
        """
        Post a comment.

        Args:
            body: Comment text (Markdown)

        Returns:
            IssueComment: The created comment
        """
        api = self._require_api()
        return api.create(IssueComment, self._comments_path(), {"body": body}, parent=self)

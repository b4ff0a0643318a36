"""Issue resource."""

import datetime
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

from hubclient.models.comment import Commentable
from hubclient.models.user import User
from hubclient.utils.date_utils import parse_timestamp

if TYPE_CHECKING:
    from hubclient.api.github_api import GitHubAPI
    from hubclient.models.repository import Repository


@dataclass(frozen=True)
class Issue(Commentable):
    """An issue, identified by its number within its repository."""

    number: int
    title: Optional[str] = field(default=None, compare=False)
    body: Optional[str] = field(default=None, compare=False)
    state: Optional[str] = field(default=None, compare=False)
    user: Optional[User] = field(default=None, compare=False)
    html_url: Optional[str] = field(default=None, compare=False)
    created_at: Optional[datetime.datetime] = field(default=None, compare=False)
    updated_at: Optional[datetime.datetime] = field(default=None, compare=False)
    closed_at: Optional[datetime.datetime] = field(default=None, compare=False)
    repository: Optional["Repository"] = field(default=None, repr=False)
    _api: Optional["GitHubAPI"] = field(default=None, repr=False, compare=False)

    @classmethod
    def _from_json(
        cls,
        data: Dict,
        api: Optional["GitHubAPI"],
        repository: Optional["Repository"] = None,
        **context: Any,
    ) -> "Issue":
        user = data.get("user")
        return cls(
            number=int(data["number"]),
            title=data.get("title"),
            body=data.get("body"),
            state=data.get("state"),
            user=User.from_dict(user, api=api) if user else None,
            html_url=data.get("html_url"),
            created_at=parse_timestamp(data.get("created_at")),
            updated_at=parse_timestamp(data.get("updated_at")),
            closed_at=parse_timestamp(data.get("closed_at")),
            repository=repository,
            _api=api,
        )

    def __str__(self) -> str:
        return f"{self.repository or '?'}#{self.number}"

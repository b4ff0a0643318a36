"""User and organization resources."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

from hubclient.models.base import Resource

if TYPE_CHECKING:
    from hubclient.api.github_api import GitHubAPI


@dataclass(frozen=True)
class User(Resource):
    """A GitHub account. Equal to any other User with the same login."""

    login: str
    id: Optional[int] = field(default=None, compare=False)
    avatar_url: Optional[str] = field(default=None, compare=False)
    html_url: Optional[str] = field(default=None, compare=False)
    type: Optional[str] = field(default=None, compare=False)
    name: Optional[str] = field(default=None, compare=False)
    _api: Optional["GitHubAPI"] = field(default=None, repr=False, compare=False)

    @classmethod
    def _from_json(cls, data: Dict, api: Optional["GitHubAPI"], **context: Any) -> "User":
        return cls(
            login=data["login"],
            id=data.get("id"),
            avatar_url=data.get("avatar_url"),
            html_url=data.get("html_url"),
            type=data.get("type"),
            name=data.get("name"),
            _api=api,
        )

    def __str__(self) -> str:
        return self.login


@dataclass(frozen=True)
class Organization(Resource):
    """A GitHub organization. Equal to any other Organization with the same login."""

    login: str
    id: Optional[int] = field(default=None, compare=False)
    description: Optional[str] = field(default=None, compare=False)
    avatar_url: Optional[str] = field(default=None, compare=False)
    url: Optional[str] = field(default=None, compare=False)
    _api: Optional["GitHubAPI"] = field(default=None, repr=False, compare=False)

    @classmethod
    def _from_json(cls, data: Dict, api: Optional["GitHubAPI"], **context: Any) -> "Organization":
        return cls(
            login=data["login"],
            id=data.get("id"),
            description=data.get("description"),
            avatar_url=data.get("avatar_url"),
            url=data.get("url"),
            _api=api,
        )

    def __str__(self) -> str:
        return self.login

"""Branch resource."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

from hubclient.models.base import Resource

if TYPE_CHECKING:
    from hubclient.api.github_api import GitHubAPI
    from hubclient.models.repository import Repository


@dataclass(frozen=True)
class CommitRef:
    """The commit a branch points at."""

    sha: str
    url: Optional[str] = field(default=None, compare=False)


@dataclass(frozen=True)
class Branch(Resource):
    """A branch as listed by ``GET /repos/{owner}/{repo}/branches``.

    Equal to any Branch with the same name pointing at the same commit.
    """

    name: str
    commit: CommitRef
    protected: bool = field(default=False, compare=False)
    repository: Optional["Repository"] = field(default=None, repr=False, compare=False)
    _api: Optional["GitHubAPI"] = field(default=None, repr=False, compare=False)

    @classmethod
    def _from_json(
        cls,
        data: Dict,
        api: Optional["GitHubAPI"],
        repository: Optional["Repository"] = None,
        **context: Any,
    ) -> "Branch":
        commit = data["commit"]
        return cls(
            name=data["name"],
            commit=CommitRef(sha=commit["sha"], url=commit.get("url")),
            protected=bool(data.get("protected", False)),
            repository=repository,
            _api=api,
        )

    def __str__(self) -> str:
        return self.name

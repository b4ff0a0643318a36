"""Git reference resource."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

from hubclient.api.url_template import build_path
from hubclient.core.constants import REPO_REF_PATH
from hubclient.models.base import Resource

if TYPE_CHECKING:
    from hubclient.api.github_api import GitHubAPI
    from hubclient.models.repository import Repository

_REFS_PREFIX = "refs/"


@dataclass(frozen=True)
class RefObject:
    """The git object a reference points at."""

    sha: str
    type: Optional[str] = field(default=None, compare=False)
    url: Optional[str] = field(default=None, compare=False)


@dataclass(frozen=True)
class Ref(Resource):
    """A git reference such as ``refs/heads/main``."""

    ref: str
    target: RefObject
    node_id: Optional[str] = field(default=None, compare=False)
    url: Optional[str] = field(default=None, compare=False)
    repository: Optional["Repository"] = field(default=None, repr=False)
    _api: Optional["GitHubAPI"] = field(default=None, repr=False, compare=False)

    @classmethod
    def _from_json(
        cls,
        data: Dict,
        api: Optional["GitHubAPI"],
        repository: Optional["Repository"] = None,
        **context: Any,
    ) -> "Ref":
        target = data["object"]
        return cls(
            ref=data["ref"],
            target=RefObject(sha=target["sha"], type=target.get("type"), url=target.get("url")),
            node_id=data.get("node_id"),
            url=data.get("url"),
            repository=repository,
            _api=api,
        )

    @property
    def sha(self) -> str:
        return self.target.sha

    @property
    def short_name(self) -> str:
        """The ref without its ``refs/`` prefix, as the refs endpoint expects it."""
        if self.ref.startswith(_REFS_PREFIX):
            return self.ref[len(_REFS_PREFIX):]
        return self.ref

    def refresh(self) -> Optional["Ref"]:
        """Fetch this reference again, e.g. to see where it points now."""
        api = self._require_api()
        repo = self.repository
        path = build_path(
            REPO_REF_PATH,
            {
                "owner": repo.owner_login if repo else None,
                "repo": repo.name if repo else None,
                "ref": self.short_name,
            },
        )
        return api.fetch_one(Ref, path, repository=repo)

    def __str__(self) -> str:
        return self.ref

"""Shared behaviour for resource objects."""

from typing import TYPE_CHECKING, Any, Dict, Optional

from hubclient.core.errors import DecodeError, NotWired

if TYPE_CHECKING:
    from hubclient.api.github_api import GitHubAPI


class Resource:
    """
    Mixin for the frozen dataclasses returned by the API.

    Subclasses declare an ``_api`` field (excluded from equality) and
    implement ``_from_json``. ``from_dict`` is the only decode path: it wraps
    shape errors in DecodeError and passes the client handle and parent
    context straight into the constructor.
    """

    @classmethod
    def from_dict(cls, data: Any, api: Optional["GitHubAPI"] = None, **context: Any):
        """
        Build an adopted resource from a decoded JSON object.

        Args:
            data: Decoded JSON for one resource
            api: Client handle that fetched it
            **context: Parent reference and flags specific to the resource type

        Raises:
            DecodeError: If ``data`` does not have the expected shape
        """
        if not isinstance(data, dict):
            raise DecodeError(f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}")
        try:
            return cls._from_json(data, api, **context)
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            raise DecodeError(f"Malformed {cls.__name__} payload: {e!r}") from e

    @classmethod
    def _from_json(cls, data: Dict, api: Optional["GitHubAPI"], **context: Any):
        raise NotImplementedError

    def _require_api(self) -> "GitHubAPI":
        """Return the client handle, or fail if this object was never adopted."""
        api = getattr(self, "_api", None)
        if api is None:
            raise NotWired(
                f"{type(self).__name__} {self} is not attached to a GitHubAPI client; "
                "obtain it through a client call before using its methods"
            )
        return api

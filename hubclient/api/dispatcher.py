"""Typed dispatch: decode API responses into adopted resource objects."""

import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

from hubclient.core.errors import DecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GitHubDispatchMethods:
    """
    Typed request helpers mixed into GitHubAPI.

    Each helper performs one call through ``self.request`` and hands every
    decoded item to ``model.from_dict`` together with ``api=self`` and the
    caller's context (parent resource, detailed flag). Adoption therefore
    happens while the object is being constructed; nothing unadopted ever
    reaches the caller.
    """

    def fetch_one(
        self, model: Type[T], path: str, params: Optional[Dict] = None, **context: Any
    ) -> Optional[T]:
        """
        GET a single resource.

        Args:
            model: Resource class to decode into
            path: Expanded API path
            params: URL query parameters
            **context: Adoption context forwarded to ``model.from_dict``

        Returns:
            The adopted resource, or None if it does not exist
        """
        payload = self.request("GET", path, params=params)
        if payload is None:
            return None
        return model.from_dict(payload, api=self, **context)

    def fetch_list(
        self,
        model: Type[T],
        path: str,
        params: Optional[Dict] = None,
        items_key: Optional[str] = None,
        **context: Any,
    ) -> Optional[List[T]]:
        """
        GET a list endpoint, one page only.

        Args:
            model: Resource class to decode each element into
            path: Expanded API path
            params: URL query parameters
            items_key: Key holding the array when the endpoint wraps it in an
                       object (the search API uses "items")
            **context: Adoption context forwarded to ``model.from_dict``

        Returns:
            Adopted resources in server order, or None if the endpoint is absent
        """
        payload = self.request("GET", path, params=params)
        if payload is None:
            return None

        if items_key is not None:
            if not isinstance(payload, dict) or items_key not in payload:
                raise DecodeError(f"Expected an object with '{items_key}' from {path}")
            payload = payload[items_key]

        if not isinstance(payload, list):
            raise DecodeError(
                f"Expected a JSON array from {path}, got {type(payload).__name__}"
            )

        items = [model.from_dict(item, api=self, **context) for item in payload]
        logger.debug(f"Decoded {len(items)} {model.__name__} object(s) from {path}")
        return items

    def create(self, model: Type[T], path: str, data: Dict, **context: Any) -> Optional[T]:
        """
        POST a JSON body and decode the created resource.

        Args:
            model: Resource class to decode into
            path: Expanded API path
            data: JSON request body, sent with its keys as given
            **context: Adoption context forwarded to ``model.from_dict``

        Returns:
            The adopted resource, or None if the response body was empty
        """
        payload = self.request("POST", path, data=data)
        if payload is None:
            return None
        return model.from_dict(payload, api=self, **context)

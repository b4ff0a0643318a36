"""Expansion of ``{name}`` placeholders in API path templates."""

import re
from typing import Any, List, Mapping

from hubclient.core.errors import UrlTemplateError

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def placeholders(template: str) -> List[str]:
    """Return the placeholder names of a template, in order of appearance."""
    return _PLACEHOLDER.findall(template)


def build_path(template: str, segments: Mapping[str, Any]) -> str:
    """
    Substitute every placeholder in a path template.

    Values are inserted verbatim (after ``str()``), so a ref such as
    ``heads/main`` keeps its slash. Callers supply values that are already
    safe for their position in the path.

    Args:
        template: Path template, e.g. ``/repos/{owner}/{repo}/pulls/{pull}``
        segments: Mapping from placeholder name to value

    Returns:
        str: The expanded path

    Raises:
        UrlTemplateError: If a placeholder has no value, or its value is None
    """
    missing = [name for name in placeholders(template) if segments.get(name) is None]
    if missing:
        raise UrlTemplateError(
            f"No value for placeholder(s) {', '.join(missing)} in template {template!r}"
        )
    return _PLACEHOLDER.sub(lambda match: str(segments[match.group(1)]), template)

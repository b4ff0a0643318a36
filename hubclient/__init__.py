"""Typed client for the GitHub REST API."""

from hubclient.api.github_api import GitHubAPI
from hubclient.api.url_template import build_path
from hubclient.core.errors import (
    ApiError,
    DecodeError,
    HubClientError,
    NotWired,
    TransportError,
    UnsupportedOnSummary,
    UrlTemplateError,
)
from hubclient.models.branch import Branch, CommitRef
from hubclient.models.comment import IssueComment
from hubclient.models.issue import Issue
from hubclient.models.pull_request import PullRequest, PullRequestBranch
from hubclient.models.reference import Ref, RefObject
from hubclient.models.repository import Repository
from hubclient.models.user import Organization, User

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "Branch",
    "CommitRef",
    "DecodeError",
    "GitHubAPI",
    "HubClientError",
    "Issue",
    "IssueComment",
    "NotWired",
    "Organization",
    "PullRequest",
    "PullRequestBranch",
    "Ref",
    "RefObject",
    "Repository",
    "TransportError",
    "UnsupportedOnSummary",
    "UrlTemplateError",
    "User",
    "build_path",
]

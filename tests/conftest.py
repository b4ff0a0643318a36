"""Shared test fixtures for hubclient."""

from __future__ import annotations

import json
from unittest.mock import MagicMock

import pytest

from hubclient.api.github_api import GitHubAPI


def make_response(status_code: int = 200, payload=None, text: str | None = None) -> MagicMock:
    """Build a stand-in for requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    if payload is not None:
        body = json.dumps(payload)
        response.json.return_value = payload
    else:
        body = text or ""
        response.json.side_effect = ValueError("No JSON object could be decoded")
    response.text = body
    response.content = body.encode()
    return response


def repo_payload(owner: str = "octo", name: str = "hello", **extra) -> dict:
    data = {
        "name": name,
        "full_name": f"{owner}/{name}",
        "owner": {"login": owner, "id": 1},
        "description": "Hello world",
        "default_branch": "main",
        "fork": False,
        "forks_count": 3,
        "private": False,
        "clone_url": f"https://github.com/{owner}/{name}.git",
        "created_at": "2024-01-02T03:04:05Z",
    }
    data.update(extra)
    return data


@pytest.fixture
def api(monkeypatch) -> GitHubAPI:
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("GITHUB_API_URL", raising=False)
    client = GitHubAPI(token="test-token")
    client.session.request = MagicMock()
    return client


@pytest.fixture
def respond(api):
    """Queue responses for the stubbed session, in call order."""

    def _respond(*responses):
        api.session.request.side_effect = list(responses)
        return api.session.request

    return _respond

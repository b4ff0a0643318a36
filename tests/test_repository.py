"""Tests for hubclient.models.repository."""

from __future__ import annotations

import datetime

import pytest

from hubclient.core.errors import DecodeError, NotWired, UnsupportedOnSummary
from hubclient.models.branch import Branch, CommitRef
from hubclient.models.issue import Issue
from hubclient.models.pull_request import PullRequest
from hubclient.models.reference import Ref
from hubclient.models.repository import Repository
from hubclient.models.user import User

from conftest import make_response, repo_payload


def pull_payload(number: int = 42, **extra) -> dict:
    data = {
        "number": number,
        "title": "Add feature",
        "body": "Details",
        "state": "open",
        "user": {"login": "contributor"},
        "head": {"ref": "feature", "sha": "abc123", "label": "contributor:feature"},
        "base": {"ref": "main", "sha": "def456", "label": "octo:main"},
        "merged_at": None,
    }
    data.update(extra)
    return data


@pytest.fixture
def detailed_repo(api, respond) -> Repository:
    respond(make_response(200, repo_payload()))
    return api.get_repository("octo", "hello")


@pytest.fixture
def summary_repo(api, respond) -> Repository:
    respond(make_response(200, [repo_payload()]))
    return api.get_repositories("octo")[0]


class TestDecoding:
    def test_fields(self, detailed_repo):
        assert detailed_repo.name == "hello"
        assert detailed_repo.owner == User(login="octo")
        assert detailed_repo.owner_login == "octo"
        assert detailed_repo.default_branch == "main"
        assert detailed_repo.forks == 3
        assert detailed_repo.clone_url == "https://github.com/octo/hello.git"
        assert detailed_repo.created_at == datetime.datetime(
            2024, 1, 2, 3, 4, 5, tzinfo=datetime.timezone.utc
        )
        assert str(detailed_repo) == "octo/hello"

    def test_owner_is_adopted_too(self, api, detailed_repo):
        assert detailed_repo.owner._api is api

    def test_missing_owner_is_decode_error(self):
        with pytest.raises(DecodeError):
            Repository.from_dict({"name": "hello"})

    def test_bad_timestamp_is_decode_error(self):
        with pytest.raises(DecodeError):
            Repository.from_dict(repo_payload(created_at="not a date"))

    def test_out_of_range_timestamp_is_decode_error(self, api, respond):
        respond(make_response(200, repo_payload(created_at="99999999999999999999999")))
        with pytest.raises(DecodeError):
            api.get_repository("octo", "hello")

    def test_organization(self, api):
        repo = Repository.from_dict(repo_payload(organization={"login": "acme"}), api=api)
        assert repo.organization.login == "acme"
        assert repo.organization._api is api

    def test_fields_are_read_only(self, detailed_repo):
        with pytest.raises(AttributeError):
            detailed_repo.name = "other"


class TestEquality:
    def test_equal_by_owner_and_name(self):
        a = Repository.from_dict(repo_payload(description="one"))
        b = Repository.from_dict(repo_payload(description="two"), detailed=True)
        assert a == b
        assert hash(a) == hash(b)

    def test_different_owner(self):
        assert Repository.from_dict(repo_payload(owner="a")) != Repository.from_dict(
            repo_payload(owner="b")
        )

    def test_not_equal_to_other_types(self):
        repo = Repository.from_dict(repo_payload())
        assert repo != "octo/hello"
        assert repo != User(login="octo")

    def test_usable_in_sets(self):
        repos = {Repository.from_dict(repo_payload()), Repository.from_dict(repo_payload())}
        assert len(repos) == 1


class TestDetailedState:
    def test_summary_parent_is_unsupported(self, summary_repo):
        assert summary_repo.detailed is False
        with pytest.raises(UnsupportedOnSummary):
            summary_repo.parent

    def test_detailed_without_parent(self, detailed_repo):
        assert detailed_repo.parent is None

    def test_detailed_fork_parent(self, api, respond):
        respond(
            make_response(
                200, repo_payload(owner="me", fork=True, parent=repo_payload(owner="octo"))
            )
        )
        fork = api.get_repository("me", "hello")
        assert fork.fork is True
        assert fork.parent == Repository(name="hello", owner=User(login="octo"))
        assert fork.parent._api is api
        assert fork.parent.detailed is False

    def test_refresh_returns_new_detailed_object(self, api, respond, summary_repo):
        session = respond(make_response(200, repo_payload()))
        detailed = summary_repo.refresh()
        assert detailed is not summary_repo
        assert detailed == summary_repo
        assert detailed.detailed is True
        assert summary_repo.detailed is False
        assert session.call_args[0][1] == "https://api.github.com/repos/octo/hello"

    def test_refresh_of_deleted_repository(self, respond, summary_repo):
        respond(make_response(404, {"message": "Not Found"}))
        assert summary_repo.refresh() is None


class TestNotWired:
    def test_hand_built_repository_is_inert(self):
        repo = Repository(name="hello", owner=User(login="octo"))
        with pytest.raises(NotWired):
            repo.get_branches()
        with pytest.raises(NotWired):
            repo.create_issue("t", "b")

    def test_decoded_without_client_is_inert(self):
        repo = Repository.from_dict(repo_payload())
        with pytest.raises(NotWired):
            repo.get_pull_request(1)


class TestFollowUpCalls:
    def test_get_branches(self, api, respond, detailed_repo):
        session = respond(
            make_response(
                200,
                [
                    {"name": "main", "commit": {"sha": "aaa111", "url": "u1"}},
                    {"name": "dev", "commit": {"sha": "bbb222", "url": "u2"}, "protected": True},
                ],
            )
        )
        branches = detailed_repo.get_branches()
        assert branches == [
            Branch(name="main", commit=CommitRef(sha="aaa111")),
            Branch(name="dev", commit=CommitRef(sha="bbb222")),
        ]
        assert branches[1].protected is True
        assert all(b._api is api and b.repository is detailed_repo for b in branches)
        assert session.call_args[0][1] == "https://api.github.com/repos/octo/hello/branches"

    def test_get_default_branch(self, respond, summary_repo):
        respond(make_response(200, repo_payload(default_branch="trunk")))
        assert summary_repo.get_default_branch() == "trunk"

    def test_get_default_branch_absent(self, respond, summary_repo):
        respond(make_response(404, {"message": "Not Found"}))
        assert summary_repo.get_default_branch() is None

    def test_get_pull_requests(self, api, respond, detailed_repo):
        respond(make_response(200, [pull_payload(1), pull_payload(2)]))
        pulls = detailed_repo.get_pull_requests()
        assert [p.number for p in pulls] == [1, 2]
        assert all(p.repository is detailed_repo and p._api is api for p in pulls)

    def test_get_pull_requests_absent(self, respond, detailed_repo):
        respond(make_response(404, {"message": "Not Found"}))
        assert detailed_repo.get_pull_requests() is None

    def test_get_pull_request(self, api, respond, detailed_repo):
        session = respond(make_response(200, pull_payload(42, merged=True)))
        pull = detailed_repo.get_pull_request(42)
        assert pull.number == 42
        assert pull.merged is True
        assert pull.head.ref == "feature"
        assert pull.base.ref == "main"
        assert pull.repository is detailed_repo
        assert pull._api is api
        assert session.call_args[0][1] == "https://api.github.com/repos/octo/hello/pulls/42"

    def test_get_pull_request_absent(self, respond, detailed_repo):
        respond(make_response(404, {"message": "Not Found"}))
        assert detailed_repo.get_pull_request(999) is None

    def test_create_pull_request_sends_literal_base(self, api, respond, detailed_repo):
        session = respond(make_response(201, pull_payload(7)))
        pull = detailed_repo.create_pull_request("me:feature", "main", "Title", "Body")
        args, kwargs = session.call_args
        assert args == ("POST", "https://api.github.com/repos/octo/hello/pulls")
        assert kwargs["json"] == {
            "title": "Title",
            "body": "Body",
            "head": "me:feature",
            "base": "main",
        }
        assert isinstance(pull, PullRequest)
        assert pull.repository is detailed_repo
        assert pull._api is api

    def test_get_ref(self, api, respond, detailed_repo):
        session = respond(
            make_response(
                200,
                {
                    "ref": "refs/heads/main",
                    "node_id": "MDM6UmVm",
                    "object": {"sha": "aaa111", "type": "commit"},
                },
            )
        )
        ref = detailed_repo.get_ref("heads/main")
        assert isinstance(ref, Ref)
        assert ref.sha == "aaa111"
        assert ref.repository is detailed_repo
        assert ref._api is api
        assert (
            session.call_args[0][1]
            == "https://api.github.com/repos/octo/hello/git/refs/heads/main"
        )

    def test_create_issue(self, api, respond, detailed_repo):
        session = respond(make_response(201, {"number": 5, "title": "Bug", "state": "open"}))
        issue = detailed_repo.create_issue("Bug", "It broke")
        assert session.call_args[1]["json"] == {"title": "Bug", "body": "It broke"}
        assert issue == Issue(number=5, repository=detailed_repo)
        assert issue._api is api

    def test_create_fork(self, api, respond, detailed_repo):
        session = respond(make_response(202, repo_payload(owner="me", fork=True)))
        fork = detailed_repo.create_fork()
        assert session.call_args[0] == ("POST", "https://api.github.com/repos/octo/hello/forks")
        assert fork.owner_login == "me"
        assert fork._api is api
        assert fork.detailed is False

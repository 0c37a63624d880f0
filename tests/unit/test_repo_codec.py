"""Tests for the repo codec — stored map shape and decode failures."""

import logging

import pytest

from agentsession.core.errors import IdenticalInputOutputError, MalformedEncodedRepoError
from agentsession.runtime.repo_codec import (
    LOCATION_SCHEMA,
    REPO_SCHEMA,
    decode_repo,
    decode_repos,
    encode_repo,
    encode_repos,
)
from agentsession.runtime.repo_validator import validate_repo
from agentsession.schemas.repo import RepoLocation, SimpleRepo

UPSTREAM = "https://github.com/user/repo"
FORK = "https://github.com/user/fork"


class TestEncodeRepo:
    def test_input_only(self) -> None:
        repo = SimpleRepo(input=RepoLocation(url=UPSTREAM, branch="main"))
        assert encode_repo(repo) == {"input": {"url": UPSTREAM, "branch": "main"}}

    def test_auto_push_without_branches(self) -> None:
        repo = SimpleRepo(
            input=RepoLocation(url=UPSTREAM),
            output=RepoLocation(url=FORK),
            auto_push=True,
        )
        assert encode_repo(repo) == {
            "input": {"url": UPSTREAM},
            "output": {"url": FORK},
            "autoPush": True,
        }

    def test_auto_push_false_is_kept(self) -> None:
        repo = SimpleRepo(input=RepoLocation(url=UPSTREAM), auto_push=False)
        assert encode_repo(repo)["autoPush"] is False

    def test_unset_auto_push_is_omitted(self) -> None:
        repo = SimpleRepo(input=RepoLocation(url=UPSTREAM))
        assert "autoPush" not in encode_repo(repo)

    def test_empty_branch_is_kept(self) -> None:
        repo = SimpleRepo(input=RepoLocation(url=UPSTREAM, branch=""))
        assert encode_repo(repo) == {"input": {"url": UPSTREAM, "branch": ""}}

    def test_literal_branch_not_trimmed(self) -> None:
        repo = SimpleRepo(input=RepoLocation(url=UPSTREAM, branch="  dev "))
        assert encode_repo(repo)["input"]["branch"] == "  dev "

    def test_no_validation_on_encode(self) -> None:
        assert encode_repo(SimpleRepo()) == {}

    def test_missing_input_drops_output_and_auto_push(self) -> None:
        repo = SimpleRepo(output=RepoLocation(url=FORK, branch="x"), auto_push=False)
        assert encode_repo(repo) == {}


class TestDecodeRepo:
    def test_full(self) -> None:
        repo = decode_repo({
            "input": {"url": UPSTREAM, "branch": "main"},
            "output": {"url": FORK, "branch": "feature"},
            "autoPush": False,
        })
        assert repo == SimpleRepo(
            input=RepoLocation(url=UPSTREAM, branch="main"),
            output=RepoLocation(url=FORK, branch="feature"),
            auto_push=False,
        )

    def test_missing_optional_keys(self) -> None:
        repo = decode_repo({"input": {"url": UPSTREAM}})
        assert repo.input == RepoLocation(url=UPSTREAM)
        assert repo.output is None
        assert repo.auto_push is None

    def test_unknown_keys_ignored(self) -> None:
        repo = decode_repo({"input": {"url": UPSTREAM, "depth": 1}, "extra": True})
        assert repo == SimpleRepo(input=RepoLocation(url=UPSTREAM))

    def test_missing_input(self) -> None:
        with pytest.raises(MalformedEncodedRepoError) as exc_info:
            decode_repo({"output": {"url": FORK}})
        assert exc_info.value.path == "repo.input"

    def test_missing_input_url(self) -> None:
        with pytest.raises(MalformedEncodedRepoError) as exc_info:
            decode_repo({"input": {"branch": "main"}})
        assert exc_info.value.path == "repo.input.url"

    def test_missing_output_url(self) -> None:
        with pytest.raises(MalformedEncodedRepoError, match=r"repo\.output\.url"):
            decode_repo({"input": {"url": UPSTREAM}, "output": {"branch": "x"}})

    def test_non_mapping(self) -> None:
        with pytest.raises(MalformedEncodedRepoError, match="expected a mapping, got str"):
            decode_repo("https://github.com/user/repo")

    def test_bool_rejected_as_url(self) -> None:
        with pytest.raises(MalformedEncodedRepoError, match="expected str, got bool"):
            decode_repo({"input": {"url": True}})

    def test_string_rejected_as_auto_push(self) -> None:
        with pytest.raises(MalformedEncodedRepoError, match="expected bool, got str"):
            decode_repo({"input": {"url": UPSTREAM}, "autoPush": "true"})

    def test_int_rejected_as_auto_push(self) -> None:
        with pytest.raises(MalformedEncodedRepoError, match="expected bool, got int"):
            decode_repo({"input": {"url": UPSTREAM}, "autoPush": 1})

    def test_blank_url_decodes_without_validation(self) -> None:
        repo = decode_repo({"input": {"url": "  "}})
        assert repo.input is not None
        assert repo.input.url == "  "

    def test_malformed_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="agentsession.runtime.repo_codec"):
            with pytest.raises(MalformedEncodedRepoError):
                decode_repo({})
        assert "Malformed stored repo" in caplog.text


class TestRepoSequences:
    def test_order_preserved(self) -> None:
        repos = [
            SimpleRepo(input=RepoLocation(url=f"https://github.com/user/r{i}"))
            for i in range(5)
        ]
        assert decode_repos(encode_repos(repos)) == repos

    def test_none_decodes_to_empty(self) -> None:
        assert decode_repos(None) == []

    def test_index_in_error_path(self) -> None:
        items = [{"input": {"url": UPSTREAM}}, {"input": {}}]
        with pytest.raises(MalformedEncodedRepoError) as exc_info:
            decode_repos(items)
        assert exc_info.value.path == "repos[1].input.url"

    @pytest.mark.parametrize("items", [{"input": {}}, "repos", 3])
    def test_non_list_rejected(self, items: object) -> None:
        with pytest.raises(MalformedEncodedRepoError, match="expected a list"):
            decode_repos(items)  # type: ignore[arg-type]


class TestSchemaTable:
    def test_table_keys_cover_model_fields(self) -> None:
        assert {f.attr for f in REPO_SCHEMA.fields} == set(SimpleRepo.model_fields)
        assert {f.attr for f in LOCATION_SCHEMA.fields} == set(RepoLocation.model_fields)

    def test_table_keys_match_wire_aliases(self) -> None:
        for schema in (REPO_SCHEMA, LOCATION_SCHEMA):
            for field in schema.fields:
                assert schema.model.model_fields[field.attr].alias == field.key


class TestScenarios:
    def test_valid_input_only_encodes(self) -> None:
        repo = SimpleRepo(input=RepoLocation(url=UPSTREAM, branch="main"))
        validate_repo(repo)
        assert encode_repo(repo) == {"input": {"url": UPSTREAM, "branch": "main"}}

    def test_decoded_repo_can_be_revalidated(self) -> None:
        repo = decode_repo({
            "input": {"url": UPSTREAM, "branch": "main"},
            "output": {"url": UPSTREAM, "branch": "main"},
        })
        with pytest.raises(IdenticalInputOutputError, match="must differ"):
            validate_repo(repo)

"""Shared test fixtures for AgentSession."""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import pytest

from agentsession.api_schemas import CreateSessionRequest
from agentsession.schemas.repo import RepoLocation, SimpleRepo
from agentsession.settings import CONFIG_DIR_ENV, SessionSettings

UPSTREAM = "https://github.com/user/repo"
FORK = "https://github.com/user/fork"


# ── Fixtures ───────────────────────────────────────────────────────


@pytest.fixture()
def input_only_repo() -> SimpleRepo:
    """Repo that clones ``main`` and pushes nowhere."""
    return SimpleRepo(input=RepoLocation(url=UPSTREAM, branch="main"))


@pytest.fixture()
def fork_repo() -> SimpleRepo:
    """Repo that clones upstream and pushes to a fork with autoPush on."""
    return SimpleRepo(
        input=RepoLocation(url=UPSTREAM, branch="main"),
        output=RepoLocation(url=FORK, branch="feature"),
        auto_push=True,
    )


@pytest.fixture()
def settings() -> SessionSettings:
    return SessionSettings(default_timeout=600, default_display_name="untitled")


@pytest.fixture()
def create_request(input_only_repo: SimpleRepo, fork_repo: SimpleRepo) -> CreateSessionRequest:
    """Request body with two valid repos, as a client would send it."""
    return CreateSessionRequest.model_validate({
        "initialPrompt": "Fix the failing tests",
        "displayName": "Test fixer",
        "repos": [
            input_only_repo.model_dump(by_alias=True, exclude_none=True),
            fork_repo.model_dump(by_alias=True, exclude_none=True),
        ],
        "labels": {"team": "platform"},
    })


@pytest.fixture()
def fixed_now() -> datetime:
    return datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC)


@pytest.fixture()
def isolated_config_dir(tmp_path, monkeypatch) -> Path:
    """Point the settings loader at an empty per-test directory."""
    config_dir = tmp_path / "agentsession-config"
    monkeypatch.setenv(CONFIG_DIR_ENV, str(config_dir))
    return config_dir

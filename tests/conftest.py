"""Shared fixtures: fake GitHub objects and Gemini replies, no network."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest


def gemini_reply(*texts):
    parts = [SimpleNamespace(text=t) for t in texts]
    return SimpleNamespace(candidates=[SimpleNamespace(content=SimpleNamespace(parts=parts))])


def github_file(filename="login.ts", status="added", additions=50, deletions=2, patch="@@ -0,0 +1,50 @@"):
    return SimpleNamespace(
        filename=filename,
        status=status,
        additions=additions,
        deletions=deletions,
        changes=additions + deletions,
        patch=patch,
    )


@pytest.fixture
def credentials(monkeypatch):
    monkeypatch.setenv("GITHUB_PRD_TOKEN", "ghp_testtoken1234")
    monkeypatch.setenv("GEMINI_API_KEY", "gemini-test-key")
    for name in ("GEMINI_MODEL", "GITHUB_API_URL", "MAX_OUTPUT_TOKENS",
                 "LOG_PROMPT_PREVIEW_CHARS", "LOG_MODEL_OUTPUT_PREVIEW_CHARS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_pr():
    pr = MagicMock()
    pr.title = "Add login"
    pr.body = None
    pr.html_url = "https://github.com/acme/widgets/pull/42"
    pr.base.ref = "main"
    pr.head.ref = "feature/login"
    pr.get_files.return_value = [github_file()]
    return pr


@pytest.fixture
def fake_github(fake_pr):
    gh = MagicMock()
    gh.get_repo.return_value.get_pull.return_value = fake_pr
    return gh

"""
Pytest config to ensure local package imports work without installation.
"""

from __future__ import annotations

import io
import sys
from pathlib import Path

import pytest


def _add_repo_root_to_path() -> None:
	"""
	Insert the repo root into sys.path for local imports.
	"""
	repo_root = Path(__file__).resolve().parent.parent
	repo_root_str = str(repo_root)
	if repo_root_str not in sys.path:
		sys.path.insert(0, repo_root_str)


_add_repo_root_to_path()

from ai_cli import discovery  # noqa: E402


SAMPLE_LISTING = (
	"NAME               ID              SIZE      MODIFIED\n"
	"llama3.2:latest    a80c4f17acd5    2.0 GB    3 days ago\n"
	"mistral:latest     f974a74358d6    4.1 GB    2 weeks ago\n"
)


class FakeTerminal(io.StringIO):
	"""
	Test-only stdin that reports itself as a terminal.
	"""

	def isatty(self) -> bool:
		return True


class FakeRunner:
	"""
	Test-only stand-in for `ollama list`.
	"""

	def __init__(self, listing: str = SAMPLE_LISTING) -> None:
		self.listing = listing
		self.list_calls = 0
		self.error: Exception | None = None

	def __call__(self) -> str:
		self.list_calls += 1
		if self.error:
			raise self.error
		return self.listing


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
	"""
	Keep tests away from the real home directory, runner and API key.
	"""
	monkeypatch.setenv("HOME", str(tmp_path / "home"))
	monkeypatch.delenv("OPENAI_API_KEY", raising=False)
	monkeypatch.delenv("AI_CLI_CONFIG", raising=False)
	monkeypatch.setattr(discovery, "runner_installed", lambda: False)


@pytest.fixture
def fake_runner(monkeypatch) -> FakeRunner:
	runner = FakeRunner()
	monkeypatch.setattr(discovery, "runner_installed", lambda: True)
	monkeypatch.setattr(discovery, "_run_runner_list", runner)
	return runner


@pytest.fixture
def config_path(tmp_path) -> Path:
	return tmp_path / "config" / "ai-cli.json"

#!/usr/bin/env python3
"""
Tests for the command line front-end.
"""

import io
import os
import sys
from pathlib import Path

import pytest

from ai_cli import cli
from ai_cli.config import Configuration, ConfigStore, Provider
from conftest import FakeTerminal


class PromptRecorder:
	def __init__(self, reply: str = "answer\n") -> None:
		self.reply = reply
		self.calls: list[tuple[Configuration, str]] = []

	def __call__(self, configuration: Configuration, prompt: str) -> str:
		self.calls.append((configuration, prompt))
		return self.reply


@pytest.fixture
def store(monkeypatch, config_path: Path) -> ConfigStore:
	monkeypatch.setenv("AI_CLI_CONFIG", str(config_path))
	return ConfigStore(config_path)


@pytest.fixture
def configured(store: ConfigStore) -> Configuration:
	configuration = Configuration(model="mistral:latest", provider=Provider.LOCAL_RUNNER)
	store.save(configuration)
	return configuration


@pytest.fixture
def recorder(monkeypatch) -> PromptRecorder:
	recorder = PromptRecorder()
	monkeypatch.setattr(cli, "execute_prompt", recorder)
	return recorder


def _terminal(monkeypatch, text: str = "") -> None:
	monkeypatch.setattr(sys, "stdin", FakeTerminal(text))


def _pipe(monkeypatch, text: str) -> None:
	monkeypatch.setattr(sys, "stdin", io.StringIO(text))


def test_output_flag_interleaved_with_prompt():
	args = cli.parse_args(["explain", "-o", "out.txt", "quantum", "computing"])
	config = cli.build_config(args)
	assert config.prompt_args == ["explain", "quantum", "computing"]
	assert config.output_file == Path("out.txt")
	assert config.command() is None


def test_output_flag_without_filename(monkeypatch, capsys):
	_terminal(monkeypatch)
	assert cli.main(["-o"]) == 1
	assert capsys.readouterr().err.startswith("Error: ")


def test_help_when_not_configured(monkeypatch, store, capsys):
	_terminal(monkeypatch)
	assert cli.main(["--help"]) == 0
	out = capsys.readouterr().out
	assert "Current model: not configured" in out
	assert "ai-cli set-model" in out


@pytest.mark.parametrize("argv", [["-h"], ["help"]])
def test_help_shows_current_model(monkeypatch, configured, capsys, argv):
	_terminal(monkeypatch)
	assert cli.main(argv) == 0
	assert "Current model: [ollama] mistral:latest" in capsys.readouterr().out


def test_direct_prompt_prints_verbatim(monkeypatch, configured, recorder, capsys):
	_terminal(monkeypatch)
	assert cli.main(["What", "is", "2+2?"]) == 0
	assert recorder.calls == [(configured, "What is 2+2?")]
	assert capsys.readouterr().out == "answer\n"


def test_output_file_receives_result(monkeypatch, configured, recorder, tmp_path, capsys):
	_terminal(monkeypatch)
	target = tmp_path / "answer.txt"
	assert cli.main(["-o", str(target), "Explain", "quantum", "computing"]) == 0
	assert target.read_text(encoding="utf-8") == "answer\n"
	assert capsys.readouterr().out == ""


def test_output_file_write_failure(monkeypatch, configured, recorder, tmp_path, capsys):
	_terminal(monkeypatch)
	target = tmp_path / "missing-dir" / "answer.txt"
	assert cli.main(["-o", str(target), "hello"]) == 1
	assert "failed to write output file" in capsys.readouterr().err


def test_piped_input_requires_config(monkeypatch, store, recorder, capsys):
	_pipe(monkeypatch, "Explain quantum computing\n")
	assert cli.main([]) == 1
	assert "not initialized" in capsys.readouterr().err
	assert recorder.calls == []
	assert not store.exists()


def test_piped_input_is_trimmed(monkeypatch, configured, recorder):
	_pipe(monkeypatch, "\n  Explain quantum computing \n\n")
	assert cli.main([]) == 0
	assert recorder.calls[0][1] == "Explain quantum computing"


def test_piped_input_follows_argument_prompt(monkeypatch, configured, recorder):
	_pipe(monkeypatch, "line one\nline two\n")
	assert cli.main(["summarize", "this"]) == 0
	assert recorder.calls[0][1] == "summarize this\n\nline one\nline two"


def test_interactive_prompt(monkeypatch, configured, recorder, capsys):
	_terminal(monkeypatch, "  Hi there  \n")
	assert cli.main([]) == 0
	assert recorder.calls[0][1] == "Hi there"
	assert "Enter your prompt: " in capsys.readouterr().out


def test_empty_interactive_prompt_fails(monkeypatch, configured, capsys):
	_terminal(monkeypatch, "   \n")
	assert cli.main([]) == 1
	assert capsys.readouterr().err == "Error: empty prompt\n"


def test_first_run_without_models_exits_cleanly(monkeypatch, store, recorder, capsys):
	_terminal(monkeypatch)
	assert cli.main(["hello"]) == 0
	out = capsys.readouterr().out
	assert "No configuration found" in out
	assert "No models available." in out
	assert recorder.calls == []
	assert not store.exists()


def test_first_run_selects_then_runs_prompt(monkeypatch, store, fake_runner, recorder):
	_terminal(monkeypatch, "\n")
	assert cli.main(["hello"]) == 0
	expected = Configuration(model="llama3.2:latest", provider=Provider.LOCAL_RUNNER)
	assert store.load() == expected
	assert recorder.calls == [(expected, "hello")]


def test_set_model_replaces_configuration(monkeypatch, configured, store, fake_runner, recorder, capsys):
	monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
	_terminal(monkeypatch, "5\n")
	assert cli.main(["set-model"]) == 0
	assert store.load() == Configuration(model="gpt-5.2", provider=Provider.REMOTE_API)
	assert recorder.calls == []
	assert "Model changed to: [openai] gpt-5.2" in capsys.readouterr().out


def test_set_model_without_models_fails(monkeypatch, configured, store, capsys):
	_terminal(monkeypatch, "1\n")
	assert cli.main(["set-model"]) == 1
	assert "Error: no models available" in capsys.readouterr().err
	assert store.load() == configured


def test_config_flag_overrides_path(monkeypatch, tmp_path, recorder):
	_terminal(monkeypatch)
	path = tmp_path / "alt.yaml"
	ConfigStore(path).save(Configuration(model="gpt-5-nano", provider=Provider.REMOTE_API))
	assert cli.main(["-c", str(path), "hello"]) == 0
	assert recorder.calls[0][0].provider is Provider.REMOTE_API


def test_stale_local_model_reports_error(monkeypatch, store, fake_runner, capsys):
	_terminal(monkeypatch)
	store.save(Configuration(model="phi4", provider=Provider.LOCAL_RUNNER))
	assert cli.main(["hello"]) == 1
	err = capsys.readouterr().err
	assert err.startswith("Error: configured model 'phi4' is not installed")


def test_undecodable_piped_input_reports_error(monkeypatch, configured, recorder, capsys):
	stream = io.TextIOWrapper(io.BytesIO(b"\xff\xfe bad"), encoding="utf-8")
	monkeypatch.setattr(sys, "stdin", stream)
	assert cli.main(["summarize"]) == 1
	assert capsys.readouterr().err.startswith("Error: failed to read piped input")
	assert recorder.calls == []


def test_dev_null_stdin_is_not_piped(monkeypatch, configured, recorder):
	with open(os.devnull, "r", encoding="utf-8") as null_stdin:
		monkeypatch.setattr(sys, "stdin", null_stdin)
		assert not cli.stdin_is_piped()
		assert cli.main(["hello"]) == 0
	assert recorder.calls[0][1] == "hello"


def test_file_stdin_is_piped(monkeypatch, tmp_path):
	source = tmp_path / "notes.txt"
	source.write_text("notes\n", encoding="utf-8")
	with source.open("r", encoding="utf-8") as file_stdin:
		monkeypatch.setattr(sys, "stdin", file_stdin)
		assert cli.stdin_is_piped()

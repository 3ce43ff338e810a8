#!/usr/bin/env python3
"""
Find which backends are usable and which models they offer.
"""

from __future__ import annotations

# Standard Library
from dataclasses import dataclass
import logging
import os
import shutil
import subprocess

# local repo modules
from .config import Provider
from .errors import RunnerUnavailableError

#============================================

RUNNER_EXECUTABLE = "ollama"
API_KEY_ENV_VAR = "OPENAI_API_KEY"
REMOTE_MODELS: tuple[str, ...] = (
	"gpt-5-nano",
	"gpt-5-mini",
	"gpt-5.2",
)

#============================================


@dataclass(slots=True, frozen=True)
class ModelOption:
	provider: Provider
	name: str

	def label(self) -> str:
		return f"[{self.provider}] {self.name}"


#============================================


def runner_installed() -> bool:
	return shutil.which(RUNNER_EXECUTABLE) is not None


#============================================


def _run_runner_list() -> str:
	"""
	Run `ollama list` and return its stdout.
	"""
	try:
		completed = subprocess.run(
			[RUNNER_EXECUTABLE, "list"],
			capture_output=True,
			text=True,
			check=True,
		)
	except FileNotFoundError as exc:
		raise RunnerUnavailableError(f"failed to list models: {exc}") from exc
	except subprocess.CalledProcessError as exc:
		detail = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
		raise RunnerUnavailableError(f"failed to list models: {detail}") from exc
	except OSError as exc:
		raise RunnerUnavailableError(f"failed to list models: {exc}") from exc
	return completed.stdout


#============================================


def parse_model_listing(output: str) -> list[str]:
	"""
	Extract model names from `ollama list` output.

	The first line is the column header. Every other non-blank line
	contributes its first whitespace-delimited token, in listing order.

	Args:
		output: Raw stdout of the runner.

	Returns:
		Ordered model names.
	"""
	models: list[str] = []
	for index, line in enumerate(output.splitlines()):
		if index == 0:
			continue
		fields = line.split()
		if not fields:
			continue
		models.append(fields[0])
	return models


#============================================


def list_installed_models() -> list[str]:
	return parse_model_listing(_run_runner_list())


#============================================


def is_model_installed(name: str) -> bool:
	"""
	Re-query the runner and check that a model is still installed.

	Args:
		name: Model name from the configuration.

	Returns:
		True when the runner lists the model.
	"""
	return name in list_installed_models()


#============================================


def has_api_key() -> bool:
	return bool(os.environ.get(API_KEY_ENV_VAR))


#============================================


def remote_models() -> list[str]:
	return list(REMOTE_MODELS)


#============================================


def discover_models() -> dict[Provider, list[str]]:
	"""
	Probe both providers.

	Returns:
		Mapping of provider to model names; providers without models are omitted.
	"""
	available: dict[Provider, list[str]] = {}
	if runner_installed():
		try:
			local = list_installed_models()
		except RunnerUnavailableError as exc:
			logging.warning("Skipping ollama models: %s", exc)
			local = []
		if local:
			available[Provider.LOCAL_RUNNER] = local
	else:
		logging.info("%s not found on PATH", RUNNER_EXECUTABLE)
	if has_api_key():
		available[Provider.REMOTE_API] = remote_models()
	else:
		logging.info("%s not set; OpenAI models unavailable", API_KEY_ENV_VAR)
	return available


#============================================


def flatten_options(available: dict[Provider, list[str]]) -> list[ModelOption]:
	"""
	Order options as local runner models first, then remote models.
	"""
	options: list[ModelOption] = []
	for provider in (Provider.LOCAL_RUNNER, Provider.REMOTE_API):
		for name in available.get(provider, []):
			options.append(ModelOption(provider=provider, name=name))
	return options


#============================================


def available_options() -> list[ModelOption]:
	return flatten_options(discover_models())

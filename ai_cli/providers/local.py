#!/usr/bin/env python3
"""
ollama subprocess provider.
"""

from __future__ import annotations

# Standard Library
import logging
import subprocess

# local repo modules
from .. import discovery
from ..errors import ExecutionError, ModelNotInstalledError


class LocalRunnerProvider:
	name = "ollama"

	def __init__(self, model: str) -> None:
		self.model = model

	def generate(self, prompt: str) -> str:
		if not discovery.is_model_installed(self.model):
			raise ModelNotInstalledError(self.model)
		logging.info("Running %s with model %s", discovery.RUNNER_EXECUTABLE, self.model)
		# stderr stays attached to the terminal so runner progress is visible
		try:
			completed = subprocess.run(
				[discovery.RUNNER_EXECUTABLE, "run", self.model, prompt],
				stdin=subprocess.DEVNULL,
				stdout=subprocess.PIPE,
				check=True,
			)
		except subprocess.CalledProcessError as exc:
			raise ExecutionError(f"failed to execute prompt: {exc}") from exc
		except OSError as exc:
			raise ExecutionError(f"failed to execute prompt: {exc}") from exc
		# bytes keep \r\n and \r exactly as the runner wrote them
		return completed.stdout.decode("utf-8", errors="replace")

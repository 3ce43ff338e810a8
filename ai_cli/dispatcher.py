#!/usr/bin/env python3
"""
Route a prompt to the configured provider.
"""

from __future__ import annotations

# local repo modules
from .config import Configuration, Provider
from .errors import EmptyPromptError
from .providers import LocalRunnerProvider, RemoteAPIProvider
from .providers.base import PromptProvider

#============================================

PROVIDER_CLASSES: dict[Provider, type] = {
	Provider.LOCAL_RUNNER: LocalRunnerProvider,
	Provider.REMOTE_API: RemoteAPIProvider,
}

#============================================


def build_provider(configuration: Configuration) -> PromptProvider:
	"""
	Instantiate the provider for a configuration.

	Args:
		configuration: Loaded provider and model.

	Returns:
		Provider bound to the configured model.
	"""
	provider_cls = PROVIDER_CLASSES[configuration.provider]
	return provider_cls(model=configuration.model)


#============================================


def execute_prompt(configuration: Configuration, prompt: str) -> str:
	"""
	Send one prompt and return the generated text.

	Args:
		configuration: Loaded provider and model.
		prompt: Prompt text.

	Returns:
		Generated text as produced by the backend.
	"""
	if not prompt.strip():
		raise EmptyPromptError("empty prompt")
	provider = build_provider(configuration)
	return provider.generate(prompt)

#!/usr/bin/env python3
"""
Error types raised by ai_cli.
"""

from __future__ import annotations

#============================================


class AICLIError(RuntimeError):
	"""
	Base class for every error reported to the user as `Error: <message>`.
	"""


#============================================


class ConfigNotFoundError(AICLIError):
	pass


class ConfigParseError(AICLIError):
	pass


class ConfigWriteError(AICLIError):
	pass


class NotInitializedError(AICLIError):
	pass


#============================================


class RunnerUnavailableError(AICLIError):
	"""
	The ollama executable could not be run to list models.
	"""


class ModelNotInstalledError(AICLIError):
	"""
	The configured local model is no longer installed.
	"""

	def __init__(self, model: str) -> None:
		super().__init__(
			f"configured model '{model}' is not installed. Please run 'set-model'"
		)
		self.model = model


class MissingCredentialError(AICLIError):
	pass


class ExecutionError(AICLIError):
	pass


class RemoteAPIError(AICLIError):
	"""
	The chat-completion API returned an error object.
	"""

	def __init__(self, message: str) -> None:
		super().__init__(f"OpenAI API error: {message}")
		self.api_message = message


class EmptyResponseError(AICLIError):
	pass


class EmptyPromptError(AICLIError):
	pass


#============================================


class InvalidChoiceError(AICLIError):
	pass


class NoModelsAvailableError(AICLIError):
	pass


class OutputWriteError(AICLIError):
	pass


class UsageError(AICLIError):
	pass

#!/usr/bin/env python3
"""
OpenAI chat-completion provider.
"""

from __future__ import annotations

# Standard Library
import http.client
import json
import logging
import os
import urllib.error
import urllib.request

# local repo modules
from ..discovery import API_KEY_ENV_VAR
from ..errors import (
	EmptyResponseError,
	ExecutionError,
	MissingCredentialError,
	RemoteAPIError,
)

CHAT_COMPLETIONS_URL = "https://api.openai.com/v1/chat/completions"

#============================================


def _post_json(url: str, payload: dict, api_key: str) -> bytes:
	"""
	POST a JSON payload and return the raw response body.

	Error statuses still return their body, since the API reports
	failures as a JSON error object.
	"""
	request = urllib.request.Request(
		url,
		data=json.dumps(payload).encode("utf-8"),
		headers={
			"Content-Type": "application/json",
			"Authorization": f"Bearer {api_key}",
		},
		method="POST",
	)
	try:
		with urllib.request.urlopen(request) as response:
			return response.read()
	except urllib.error.HTTPError as exc:
		logging.info("OpenAI returned status %s", exc.code)
		try:
			return exc.read()
		except (OSError, http.client.HTTPException) as read_exc:
			raise ExecutionError(f"failed to read response: {read_exc}") from read_exc
		finally:
			exc.close()
	except urllib.error.URLError as exc:
		raise ExecutionError(f"failed to send request: {exc.reason}") from exc
	except (OSError, http.client.HTTPException) as exc:
		raise ExecutionError(f"failed to send request: {exc}") from exc


#============================================


def parse_chat_response(body: bytes) -> str:
	"""
	Extract the first choice's content from a chat-completion body.

	Args:
		body: Raw response bytes.

	Returns:
		Assistant message text.
	"""
	try:
		parsed = json.loads(body.decode("utf-8"))
	except (UnicodeDecodeError, json.JSONDecodeError) as exc:
		raise ExecutionError(f"failed to parse response: {exc}") from exc
	if not isinstance(parsed, dict):
		raise ExecutionError("failed to parse response: expected a JSON object")
	error = parsed.get("error")
	if error is not None:
		message = error.get("message", "") if isinstance(error, dict) else str(error)
		raise RemoteAPIError(message)
	choices = parsed.get("choices") or []
	if not isinstance(choices, list):
		raise ExecutionError("failed to parse response: choices is not a list")
	if not choices:
		raise EmptyResponseError("no response from OpenAI")
	first = choices[0]
	if not isinstance(first, dict):
		raise ExecutionError("failed to parse response: unexpected choice shape")
	message = first.get("message") or {}
	if not isinstance(message, dict):
		raise ExecutionError("failed to parse response: unexpected choice shape")
	content = message.get("content") or ""
	if not isinstance(content, str):
		raise ExecutionError("failed to parse response: content is not text")
	return content


#============================================


class RemoteAPIProvider:
	name = "openai"

	def __init__(
		self,
		model: str,
		url: str = CHAT_COMPLETIONS_URL,
		api_key: str | None = None,
	) -> None:
		self.model = model
		self.url = url
		self.api_key = api_key

	def generate(self, prompt: str) -> str:
		api_key = self.api_key or os.environ.get(API_KEY_ENV_VAR)
		if not api_key:
			raise MissingCredentialError(f"{API_KEY_ENV_VAR} environment variable not set")
		payload: dict[str, object] = {
			"model": self.model,
			"messages": [{"role": "user", "content": prompt}],
		}
		logging.info("Sending prompt to %s with model %s", self.url, self.model)
		body = _post_json(self.url, payload, api_key)
		return parse_chat_response(body)

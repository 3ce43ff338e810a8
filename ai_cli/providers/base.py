#!/usr/bin/env python3
"""
Provider interface for prompt backends.
"""

from __future__ import annotations

from typing import Protocol


class PromptProvider(Protocol):
	name: str
	model: str

	def generate(self, prompt: str) -> str:
		"""
		Send a prompt and return the generated text.
		"""

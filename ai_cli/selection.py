#!/usr/bin/env python3
"""
Interactive model selection.
"""

from __future__ import annotations

# Standard Library
from typing import Callable

# local repo modules
from . import discovery
from .config import Configuration, ConfigStore
from .discovery import ModelOption
from .errors import InvalidChoiceError, NoModelsAvailableError

#============================================

NO_MODELS_GUIDANCE = (
	"No models available.\n"
	"Please either:\n"
	"  1. Install ollama and pull a model (e.g., 'ollama pull llama3.2')\n"
	f"  2. Set {discovery.API_KEY_ENV_VAR} environment variable"
)

#============================================


def render_menu(options: list[ModelOption]) -> str:
	lines = ["Available models:"]
	for index, option in enumerate(options, start=1):
		lines.append(f"{index}. {option.label()}")
	return "\n".join(lines)


#============================================


def parse_choice(text: str, count: int, *, allow_default: bool) -> int:
	"""
	Turn menu input into a zero-based option index.

	Args:
		text: Raw line typed by the user.
		count: Number of menu entries.
		allow_default: Treat blank input as option 1.

	Returns:
		Zero-based index into the option list.
	"""
	cleaned = text.strip()
	if not cleaned and allow_default:
		return 0
	if not (cleaned.isascii() and cleaned.isdigit()):
		raise InvalidChoiceError("invalid choice")
	choice = int(cleaned)
	if choice < 1 or choice > count:
		raise InvalidChoiceError("invalid choice")
	return choice - 1


#============================================


def run_selection(
	store: ConfigStore,
	*,
	first_run: bool,
	input_fn: Callable[[str], str] | None = None,
) -> Configuration | None:
	"""
	List available models, read a choice and persist it.

	First-run setup accepts a blank answer as option 1 and returns None
	without writing anything when no models exist. An explicit switch
	requires a numeral and raises NoModelsAvailableError instead.

	Args:
		store: Config store that receives the selection.
		first_run: True for initial setup, False for `set-model`.
		input_fn: Line reader, replaced in tests.

	Returns:
		Saved Configuration, or None when setup found nothing to select.
	"""
	options = discovery.available_options()
	if not options:
		print(NO_MODELS_GUIDANCE)
		if first_run:
			return None
		raise NoModelsAvailableError("no models available")
	print(render_menu(options))
	if first_run:
		question = f"Select a model (1-{len(options)}) [1]: "
	else:
		question = f"Select a model (1-{len(options)}): "
	reader = input_fn or input
	try:
		answer = reader(question)
	except EOFError:
		answer = ""
	index = parse_choice(answer, len(options), allow_default=first_run)
	selected = options[index]
	configuration = Configuration(model=selected.name, provider=selected.provider)
	store.save(configuration)
	if first_run:
		print(f"Selected: {configuration.label()}")
		print("Configuration saved successfully!")
	else:
		print(f"Model changed to: {configuration.label()}")
	return configuration

#!/usr/bin/env python3
"""
Command line interface for ai-cli.
"""

# Standard Library
import argparse
import logging
import os
from pathlib import Path
import stat
import sys

# local repo modules
from . import __version__
from .config import AppConfig, ConfigStore
from .dispatcher import execute_prompt
from .errors import (
	AICLIError,
	ConfigNotFoundError,
	ConfigParseError,
	ExecutionError,
	NotInitializedError,
	OutputWriteError,
	UsageError,
)
from .selection import run_selection

#============================================

HELP_TEMPLATE = """AI CLI - Ollama & OpenAI Command Line Interface

Current model: {current_model}

Usage:
  ai-cli                        Interactive mode (prompts for input)
  ai-cli "your prompt"          Execute with direct prompt
  ai-cli -o file.txt "prompt"   Execute and save output to file
  echo "prompt" | ai-cli        Execute with piped input
  echo "prompt" | ai-cli -o out.txt  Save piped output to file
  cat notes.txt | ai-cli "summarize"  Prefix piped input with a prompt
  ai-cli set-model              Change the model
  ai-cli --help                 Show this help message

Options:
  -o FILE                       Write the result to FILE instead of stdout
  -c, --config PATH             Use an alternate config file (.json or .yaml)
  -v, --verbose                 Verbose logging
  --version                     Show the version and exit

Examples:
  ai-cli "What is the capital of France?"
  ai-cli -o answer.txt "Explain quantum computing"
  echo "Explain quantum computing" | ai-cli -o output.txt

Environment Variables:
  OPENAI_API_KEY                OpenAI API key (enables OpenAI models)
  AI_CLI_CONFIG                 Config file path (default ~/.config/ai-cli.json)

Note: Configuration is created automatically on first run.
"""

#============================================


class _ArgumentParser(argparse.ArgumentParser):
	def error(self, message: str) -> None:
		raise UsageError(message)


#============================================


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse CLI arguments.

	Options may appear before or between prompt words.
	"""
	parser = _ArgumentParser(
		prog="ai-cli",
		description="Send a prompt to an ollama or OpenAI model.",
		add_help=False,
	)
	parser.add_argument(
		"-o",
		dest="output_file",
		help="Write the result to this file.",
	)
	parser.add_argument(
		"-c",
		"--config",
		dest="config_path",
		help="Alternate config file.",
	)
	parser.add_argument(
		"-v",
		"--verbose",
		dest="verbose",
		action="store_true",
		help="Verbose logging.",
	)
	parser.add_argument(
		"-h",
		"--help",
		dest="help",
		action="store_true",
		help="Show usage and the current model.",
	)
	parser.add_argument(
		"--version",
		action="version",
		version=f"%(prog)s {__version__}",
	)
	parser.add_argument(
		"prompt",
		nargs="*",
		help="Prompt words, or set-model / help.",
	)
	return parser.parse_intermixed_args(argv)


#============================================


def build_config(args: argparse.Namespace) -> AppConfig:
	"""
	Build runtime config from args.
	"""
	config = AppConfig()
	config.prompt_args = list(args.prompt)
	if args.output_file:
		config.output_file = Path(args.output_file).expanduser()
	if args.config_path:
		config.config_path = Path(args.config_path).expanduser()
	config.verbose = args.verbose
	return config


#============================================


def _color(text: str, code: str) -> str:
	if sys.stdout.isatty():
		return f"\033[{code}m{text}\033[0m"
	return text


#============================================


def stdin_is_piped() -> bool:
	"""
	True when stdin is a pipe or file. Character devices such as a
	terminal or /dev/null are not treated as piped input.
	"""
	try:
		mode = os.fstat(sys.stdin.fileno()).st_mode
	except (AttributeError, ValueError, OSError):
		return not sys.stdin.isatty()
	return not stat.S_ISCHR(mode)


#============================================


def read_piped_input() -> str:
	try:
		data = sys.stdin.read()
	except (OSError, UnicodeDecodeError) as exc:
		raise ExecutionError(f"failed to read piped input: {exc}") from exc
	return data.strip()


#============================================


def read_interactive_prompt() -> str:
	try:
		line = input("Enter your prompt: ")
	except EOFError as exc:
		raise ExecutionError("failed to read input: end of file") from exc
	return line.strip()


#============================================


def help_text(store: ConfigStore) -> str:
	try:
		current_model = store.load().label()
	except (ConfigNotFoundError, ConfigParseError):
		current_model = "not configured"
	return HELP_TEMPLATE.format(current_model=current_model)


#============================================


def ensure_configured(store: ConfigStore) -> bool:
	"""
	Run first-time setup when no config file exists.

	Returns:
		True when a configuration is available afterwards.
	"""
	if store.exists():
		return True
	print(f"{_color('[SETUP]', '34')} No configuration found. Running initial setup...")
	return run_selection(store, first_run=True) is not None


#============================================


def write_output(output: str, output_file: Path | None) -> None:
	if output_file is None:
		sys.stdout.write(output)
		sys.stdout.flush()
		return
	try:
		output_file.write_text(output, encoding="utf-8")
	except OSError as exc:
		raise OutputWriteError(f"failed to write output file: {exc}") from exc
	logging.info("Wrote %d characters to %s", len(output), output_file)


#============================================


def run(config: AppConfig, show_help: bool = False) -> int:
	"""
	Execute one invocation.

	Returns:
		Process exit code.
	"""
	store = config.store()
	command = config.command()
	if show_help or command == "help":
		print(help_text(store), end="")
		return 0
	if command == "set-model":
		run_selection(store, first_run=False)
		return 0
	piped = stdin_is_piped()
	if piped and not store.exists():
		raise NotInitializedError(
			"not initialized: run once in interactive mode to configure"
		)
	if not ensure_configured(store):
		return 0
	if config.prompt_args:
		prompt = config.prompt_text()
		if piped:
			prompt = prompt + "\n\n" + read_piped_input()
	elif piped:
		prompt = read_piped_input()
	else:
		prompt = read_interactive_prompt()
	configuration = store.load()
	logging.info("Using %s", configuration.label())
	output = execute_prompt(configuration, prompt)
	write_output(output, config.output_file)
	return 0


#============================================


def main(argv: list[str] | None = None) -> int:
	"""
	Entry point for the CLI.
	"""
	try:
		args = parse_args(argv)
		config = build_config(args)
		if config.verbose:
			logging.basicConfig(level=logging.INFO)
		else:
			logging.basicConfig(level=logging.WARNING)
		return run(config, show_help=args.help)
	except AICLIError as exc:
		print(f"Error: {exc}", file=sys.stderr)
		return 1
	except KeyboardInterrupt:
		print("Error: interrupted", file=sys.stderr)
		return 1


#============================================


if __name__ == "__main__":
	sys.exit(main())

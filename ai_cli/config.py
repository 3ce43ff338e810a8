#!/usr/bin/env python3
from __future__ import annotations

# Standard Library
from dataclasses import dataclass, field
from pathlib import Path
import enum
import json
import os

# PIP3 modules
import yaml

# local repo modules
from .errors import ConfigNotFoundError, ConfigParseError, ConfigWriteError

#============================================

CONFIG_ENV_VAR = "AI_CLI_CONFIG"
CONFIG_FILE_NAME = Path(".config") / "ai-cli.json"
YAML_SUFFIXES = {".yml", ".yaml"}

#============================================


class Provider(str, enum.Enum):
	"""
	Backend a configured model belongs to.
	"""
	LOCAL_RUNNER = "ollama"
	REMOTE_API = "openai"

	def __str__(self) -> str:
		return self.value


#============================================


@dataclass(slots=True, frozen=True)
class Configuration:
	"""
	Persisted provider and model selection.

	Attributes:
		model: Model name as the provider knows it.
		provider: Backend the model belongs to.
	"""
	model: str
	provider: Provider = Provider.LOCAL_RUNNER

	#============================================
	def label(self) -> str:
		return f"[{self.provider}] {self.model}"

	#============================================
	def to_dict(self) -> dict[str, str]:
		return {"model": self.model, "provider": self.provider.value}

	#============================================
	@classmethod
	def from_dict(cls, data: object) -> Configuration:
		"""
		Build a Configuration from decoded file contents.

		Args:
			data: Decoded JSON or YAML document.

		Returns:
			Configuration instance.
		"""
		if not isinstance(data, dict):
			raise ConfigParseError("config file must contain a mapping")
		model = data.get("model")
		if not isinstance(model, str) or not model.strip():
			raise ConfigParseError("config file has no model")
		# files written before provider support only carry a model
		raw_provider = data.get("provider") or Provider.LOCAL_RUNNER.value
		try:
			provider = Provider(raw_provider)
		except ValueError as exc:
			raise ConfigParseError(f"unknown provider: {raw_provider}") from exc
		return cls(model=model, provider=provider)


#============================================


def default_config_path() -> Path:
	"""
	Resolve the per-user config path.

	Returns:
		Path from AI_CLI_CONFIG, or ~/.config/ai-cli.json.
	"""
	override = os.environ.get(CONFIG_ENV_VAR)
	if override:
		return Path(override).expanduser()
	return Path.home() / CONFIG_FILE_NAME


#============================================


class ConfigStore:
	"""
	Reads and writes the single configuration file.
	"""

	def __init__(self, path: Path | None = None) -> None:
		self.path = path if path is not None else default_config_path()

	#============================================
	def _is_yaml(self) -> bool:
		return self.path.suffix.lower() in YAML_SUFFIXES

	#============================================
	def exists(self) -> bool:
		return self.path.is_file()

	#============================================
	def load(self) -> Configuration:
		"""
		Load the configuration file.

		Returns:
			Configuration read from disk.
		"""
		try:
			with self.path.open("r", encoding="utf-8") as handle:
				if self._is_yaml():
					loaded = yaml.safe_load(handle)
				else:
					loaded = json.load(handle)
		except FileNotFoundError as exc:
			raise ConfigNotFoundError(f"no configuration at {self.path}") from exc
		except (json.JSONDecodeError, yaml.YAMLError) as exc:
			raise ConfigParseError(f"failed to parse {self.path}: {exc}") from exc
		except OSError as exc:
			raise ConfigParseError(f"failed to read {self.path}: {exc}") from exc
		return Configuration.from_dict(loaded)

	#============================================
	def save(self, configuration: Configuration) -> None:
		"""
		Replace the configuration file with the given record.

		Args:
			configuration: Record to persist.
		"""
		data = configuration.to_dict()
		if self._is_yaml():
			text = yaml.safe_dump(data, sort_keys=False)
		else:
			text = json.dumps(data, indent=2)
		try:
			self.path.parent.mkdir(parents=True, exist_ok=True)
			self.path.write_text(text, encoding="utf-8")
		except OSError as exc:
			raise ConfigWriteError(f"failed to save config: {exc}") from exc


#============================================


@dataclass(slots=True)
class AppConfig:
	"""
	Runtime settings for one invocation.

	Attributes:
		prompt_args: Positional tokens left after option parsing.
		output_file: Optional file that receives the result.
		config_path: Optional config file override.
		verbose: Enable INFO logging.
	"""
	prompt_args: list[str] = field(default_factory=list)
	output_file: Path | None = None
	config_path: Path | None = None
	verbose: bool = False

	#============================================
	def command(self) -> str | None:
		"""
		Return the subcommand named by the first token, if any.
		"""
		if not self.prompt_args:
			return None
		first = self.prompt_args[0]
		if first == "set-model":
			return "set-model"
		if first == "help":
			return "help"
		return None

	#============================================
	def prompt_text(self) -> str:
		return " ".join(self.prompt_args)

	#============================================
	def store(self) -> ConfigStore:
		return ConfigStore(self.config_path)

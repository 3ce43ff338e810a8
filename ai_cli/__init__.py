"""
ai_cli
======

Command line client that sends a prompt to a local ollama model or the
OpenAI chat-completion API.
"""

__version__ = "0.3.0"

__all__ = [
	"cli",
	"config",
	"discovery",
	"dispatcher",
	"errors",
	"providers",
	"selection",
]

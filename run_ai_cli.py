#!/usr/bin/env python3
"""
Repo-root runner for ai_cli.

Examples:
	python run_ai_cli.py "What is the capital of France?"
	echo "Explain quantum computing" | python run_ai_cli.py -o answer.txt
	python run_ai_cli.py set-model
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
	"""
	Run the CLI entrypoint with repo-root import behavior.
	"""
	repo_root = Path(__file__).resolve().parent
	if str(repo_root) not in sys.path:
		sys.path.insert(0, str(repo_root))

	from ai_cli.cli import main as cli_main

	sys.exit(cli_main())


if __name__ == "__main__":
	main()

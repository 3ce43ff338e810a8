#!/usr/bin/env python3
"""
Tests for version sync between VERSION, pyproject.toml and the package.
"""

from pathlib import Path
import tomllib

import ai_cli


def test_version_file_matches_pyproject():
	repo_root = Path(__file__).resolve().parent.parent
	version_file = (repo_root / "VERSION").read_text(encoding="utf-8").strip()
	pyproject = tomllib.loads((repo_root / "pyproject.toml").read_text(encoding="utf-8"))
	assert version_file == pyproject["project"]["version"]
	assert ai_cli.__version__ == version_file

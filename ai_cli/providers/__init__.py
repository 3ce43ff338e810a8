#!/usr/bin/env python3
from __future__ import annotations

from .local import LocalRunnerProvider
from .remote import RemoteAPIProvider

__all__ = ["LocalRunnerProvider", "RemoteAPIProvider"]

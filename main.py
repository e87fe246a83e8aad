#!/usr/bin/env python3
"""Launcher for running from a source checkout: ``python main.py [file.md]``."""
from __future__ import annotations

from jank.main import main

if __name__ == "__main__":
    raise SystemExit(main())

#!/usr/bin/env python3
"""
caretdiag/__main__.py
=====================

``python -m caretdiag`` support; see :mod:`caretdiag.main` for commands.
"""

from caretdiag.main import main

if __name__ == "__main__":
    raise SystemExit(main())

"""
Module entrypoint for the employee directory viewer.

This file exists so that `python -m staffview ...` works consistently in all
environments, including when the console-script wrapper is not installed.
"""

from __future__ import annotations

from staffview.cli import main

if __name__ == "__main__":
    raise SystemExit(main())

"""shelltint CLI bootstrap."""

from __future__ import annotations

from shelltint.cli import app

if __name__ == "__main__":
    app()

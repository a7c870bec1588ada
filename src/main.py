"""Script de ejecución desde `src/` (`python main.py <palabras...>`)."""

from __future__ import annotations

import sys

# Extracts are UTF-8; Windows terminals may default to cp1252.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()

"""Run script.

- Lets the CLI run with `python -m main` during development.
- Keeps a simple entry point besides the installed `pascal-bench` script.
"""

from __future__ import annotations

import sys

# Box-drawing and Θ/ⁿ glyphs need utf-8 on Windows terminals (cp1252 by default).
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()

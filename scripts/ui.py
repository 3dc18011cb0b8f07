#!/usr/bin/env python3
"""Run the hexpicker demo UI from anywhere.

Uses the repo venv at ``.env`` when one exists, otherwise the current
interpreter. Extra arguments are passed through to the app.

Usage:
    python scripts/ui.py --radius 4 --hit-strategy raster
"""

import os
import sys
from pathlib import Path

SCRIPT_DIR = Path(__file__).resolve().parent
REPO_ROOT = SCRIPT_DIR.parent


def find_python() -> Path:
    """Return the venv Python interpreter path, or the running one."""
    # Windows: Scripts/python.exe, Unix: bin/python
    candidates = [
        REPO_ROOT / ".env" / "bin" / "python",
        REPO_ROOT / ".env" / "Scripts" / "python.exe",
    ]
    for p in candidates:
        if p.is_file():
            return p
    return Path(sys.executable)


def main() -> None:
    python = find_python()

    env = os.environ.copy()
    env["PYTHONPATH"] = str(REPO_ROOT) + os.pathsep + env.get("PYTHONPATH", "")

    os.chdir(REPO_ROOT)
    os.execve(
        str(python),
        [str(python), "-m", "hexpicker.frontend.app", *sys.argv[1:]],
        env,
    )


if __name__ == "__main__":
    main()

"""Run creature-dex from a source checkout: `python main.py browse`.

Puts `src/` on the import path so `cli`, `core` and `adapters` resolve
without `pip install -e .`.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"

if __name__ == "__main__":
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    from cli.main import run

    run()

# main.py
from __future__ import annotations

from tools.generate_games import main

if __name__ == "__main__":
    raise SystemExit(main())

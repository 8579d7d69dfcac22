import sys, os

# Ensure src (package imports) and the repo root (tests.helpers) are on path
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
SRC = os.path.join(ROOT, 'src')
for path in (SRC, ROOT):
    if path not in sys.path:
        sys.path.insert(0, path)

from tests.helpers import ScriptedRandom, build_board_system, set_cells

__all__ = [
    "ScriptedRandom",
    "build_board_system",
    "set_cells",
]

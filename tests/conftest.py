import sys
from pathlib import Path


def _ensure_local_paths() -> None:
    tests_dir = Path(__file__).resolve().parent
    for path in (tests_dir.parent, tests_dir):
        if str(path) not in sys.path:
            sys.path.insert(0, str(path))


_ensure_local_paths()

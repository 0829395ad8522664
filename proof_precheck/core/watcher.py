import os, time
from typing import Callable, Dict, Optional

from .loader import TEXT_EXTENSIONS


def scan_once(path: str, on_file: Callable[[str], None], seen: Dict[str, float], patterns=TEXT_EXTENSIONS) -> int:
    """Calls on_file for every new or modified file; returns how many fired."""
    fired = 0
    for entry in os.scandir(path):
        if not entry.is_file():
            continue
        if not entry.name.lower().endswith(patterns):
            continue
        mtime = entry.stat().st_mtime
        if entry.path not in seen or seen[entry.path] < mtime:
            seen[entry.path] = mtime
            on_file(entry.path)
            fired += 1
    return fired


def watch_folder(path: str, on_file: Callable[[str], None], patterns=TEXT_EXTENSIONS, interval=2.0,
                 max_rounds: Optional[int] = None):
    seen: Dict[str, float] = {}
    path = os.path.abspath(path)
    rounds = 0
    while max_rounds is None or rounds < max_rounds:
        scan_once(path, on_file, seen, patterns)
        rounds += 1
        time.sleep(interval)

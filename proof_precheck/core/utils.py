# proof_precheck/core/utils.py
from __future__ import annotations

import dataclasses
from bisect import bisect_left
from typing import List, Optional, Sequence, Tuple

from .finding import Finding


def context_slice(s: str, pos: int, radius: int = 60) -> str:
    a = max(0, pos - radius)
    b = min(len(s), pos + radius)
    return s[a:b].replace("\n", " ")


def line_col(s: str, pos: int) -> Tuple[int, int]:
    """1-based (line, column) of a code-point offset."""
    line = s.count("\n", 0, pos) + 1
    col = pos - (s.rfind("\n", 0, pos) + 1) + 1
    return line, col


def apply_suggestion(text: str, finding: Finding, replacement: Optional[str] = None) -> str:
    """Splice a finding's suggestion (or one of its alternatives) into ``text``.

    Every other finding computed for ``text`` is stale afterwards; analyze again.
    """
    repl = finding.suggestion if replacement is None else replacement
    return text[:finding.start] + repl + text[finding.end:]


def to_utf16(text: str, findings: Sequence[Finding]) -> List[Finding]:
    """Re-express spans in UTF-16 code units, the unit JS editors index by.

    Only characters outside the BMP take two units, so each offset shifts by
    the number of such characters before it.
    """
    astral = [i for i, ch in enumerate(text) if ord(ch) > 0xFFFF]
    if not astral:
        return list(findings)
    return [
        dataclasses.replace(
            f,
            start=f.start + bisect_left(astral, f.start),
            end=f.end + bisect_left(astral, f.end),
        )
        for f in findings
    ]

# proof_precheck/core/finding.py
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .constants import CATEGORY_SEVERITY, SEVERITY_WARN


@dataclass(frozen=True)
class Finding:
    category: str                                 # grammar | spelling | style | punctuation | clarity
    original_text: str                            # text[start:end]
    suggestion: str                               # "" means delete
    explanation: str                              # fixed per rule
    start: int                                    # half-open [start, end)
    end: int
    alternatives: Optional[Tuple[str, ...]] = None
    rule_id: str = ""

    @property
    def severity(self) -> str:
        return CATEGORY_SEVERITY.get(self.category, SEVERITY_WARN)

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "category": self.category,
            "originalText": self.original_text,
            "suggestion": self.suggestion,
            "explanation": self.explanation,
            "start": self.start,
            "end": self.end,
        }
        if self.alternatives is not None:
            d["alternatives"] = list(self.alternatives)
        return d

# proof_precheck/core/engine.py
import logging
import time
from typing import Any, Dict, List, Optional, Tuple

from .config import default_config
from .constants import RID
from .finding import Finding
from .loader import load_text
from .checks import lexicon, rules

logger = logging.getLogger(__name__)


def run_analysis(text: str, cfg: Optional[Dict] = None) -> Tuple[List[Finding], Dict[str, int], Dict[str, Any]]:
    cfg = cfg or default_config()
    eng = cfg.get("settings", {}).get("engine", {}) or {}
    internal_errors: List[str] = []

    t0 = time.perf_counter()

    # 1) pattern rules
    findings = rules.match(
        text,
        budget_ms=eng.get("rule_budget_ms"),
        disabled=eng.get("disabled_rules") or (),
        errors=internal_errors,
    )
    t1 = time.perf_counter()

    # 2) lexicon
    if RID["LEXICON_SYNONYM"] not in (eng.get("disabled_rules") or ()):
        findings.extend(lexicon.suggest(text))
    t2 = time.perf_counter()

    # list.sort is stable: equal starts keep rule order, then lexicon order
    findings.sort(key=lambda f: f.start)

    by_category: Dict[str, int] = {}
    for f in findings:
        by_category[f.category] = by_category.get(f.category, 0) + 1

    debug_meta = {
        "internal_errors": internal_errors,
        "timing": {
            "rules_ms": round((t1 - t0) * 1000, 3),
            "lexicon_ms": round((t2 - t1) * 1000, 3),
            "total_ms": round((time.perf_counter() - t0) * 1000, 3),
        },
    }
    logger.debug("analyzed %d chars: %d findings", len(text), len(findings))
    return findings, by_category, debug_meta


def analyze(text: str, cfg: Optional[Dict] = None) -> List[Finding]:
    return run_analysis(text, cfg)[0]


def analyze_file(path: str, cfg: Dict) -> Tuple[str, List[Finding], Dict[str, int], Dict[str, Any]]:
    text = load_text(path)
    findings, by_category, debug_meta = run_analysis(text, cfg)
    return text, findings, by_category, debug_meta

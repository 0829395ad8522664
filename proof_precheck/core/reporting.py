# proof_precheck/core/reporting.py
from __future__ import annotations
import json, datetime, os
from typing import List, Dict, Iterable, Optional

from .constants import CATEGORY_ORDER, SEVERITY_ERROR, SEVERITY_WARN
from .finding import Finding
from .utils import context_slice, line_col

# ---------------- helpers ---------------- #

def _now_iso() -> str:
    return datetime.datetime.now(datetime.timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")

def _shorten(ctx: str, left: int = 50, right: int = 50) -> str:
    """
    Compact preview: long lines are cut in the middle with an ellipsis.
    """
    if ctx is None:
        return ""
    s = ctx.replace("\n", "⏎")
    if len(s) <= left + right + 5:
        return s
    return f"{s[:left]}…{s[-right:]}"

def _severity_rank(sev: str) -> int:
    return {SEVERITY_ERROR: 0, SEVERITY_WARN: 1}.get(sev, 9)

def _category_rank(cat: str) -> int:
    return CATEGORY_ORDER.index(cat) if cat in CATEGORY_ORDER else len(CATEGORY_ORDER)

def group_rule_stats(findings: Iterable[Finding]) -> Dict[str, int]:
    """Hits per rule_id, most frequent first."""
    out: Dict[str, int] = {}
    for f in findings:
        out[f.rule_id] = out.get(f.rule_id, 0) + 1
    return dict(sorted(out.items(), key=lambda kv: (-kv[1], kv[0])))

def calc_gate(findings: Iterable[Finding]) -> Dict:
    errors = warnings = 0
    for f in findings:
        if f.severity == SEVERITY_ERROR:
            errors += 1
        else:
            warnings += 1
    return {"errors": errors, "warnings": warnings, "pass": errors == 0}

# ---------------- main API ---------------- #

def write_reports(src_path: str,
                  text: str,
                  findings: List[Finding],
                  by_category: Dict[str, int],
                  gate: Dict,
                  version: str,
                  debug_meta: Optional[Dict],
                  cfg: Optional[Dict] = None) -> None:
    """
    Writes <file>.rep (human-readable, one section per category) and
    <file>.rep.json (full findings plus rule_stats and debug info).
    """
    base, _ = os.path.splitext(src_path)
    txt_path = base + ".rep"
    json_path = base + ".rep.json"

    radius = int(((cfg or {}).get("settings", {}).get("report", {}) or {}).get("context_radius", 60))
    errors = gate.get("errors", 0)
    warnings = gate.get("warnings", 0)
    passed = bool(gate.get("pass", False))

    # ---- .rep ---- #
    cat_to_findings: Dict[str, List[Finding]] = {}
    for f in sorted(findings, key=lambda x: (_category_rank(x.category), _severity_rank(x.severity), x.start)):
        cat_to_findings.setdefault(f.category, []).append(f)
    by_cat_list = sorted(by_category.items(), key=lambda kv: (-kv[1], kv[0]))

    with open(txt_path, "w", encoding="utf-8") as fh:
        fh.write(f"File: {os.path.basename(src_path)}\n")
        fh.write(f"Checked at: {_now_iso()}\n")
        fh.write(f"Findings: {len(findings)}\n")
        if by_cat_list:
            fh.write("By category: " + "; ".join(f"{k}: {v}" for k, v in by_cat_list) + "\n\n")
        else:
            fh.write("\n")

        idx = 1
        for cat, items in cat_to_findings.items():
            fh.write(f"== {cat} ({len(items)}) ==\n")
            for f in items:
                line, col = line_col(text, f.start)
                ctx = _shorten(context_slice(text, f.start, radius), 50, 50)
                repl = f" | Suggestion: {f.suggestion!r}" if f.suggestion != f.original_text else ""
                if f.alternatives:
                    repl += " | Alternatives: " + ", ".join(f.alternatives)
                fh.write(
                    f"{idx}. [{f.severity.upper()}][{f.rule_id}] @ {line}:{col} {f.original_text!r}\n"
                    f"   {f.explanation}\n"
                    f"   Context: {ctx}{repl}\n"
                )
                idx += 1
            fh.write("\n")

        fh.write(
            f"[{'OK' if passed else 'FAIL'}] Errors: {errors}; "
            f"Warnings: {warnings}; gate: {'PASS' if passed else 'BLOCK'}\n"
        )

    # ---- .rep.json ---- #
    payload = {
        "version": version,
        "file": os.path.basename(src_path),
        "checked_at": _now_iso(),
        "findings_total": len(findings),
        "findings_by_category": by_category,
        "gate": {"errors": errors, "warnings": warnings, "pass": passed},
        "findings": [{**f.to_dict(), "rule_id": f.rule_id} for f in findings],
        "rule_stats": group_rule_stats(findings),
        "debug": {
            "timing": (debug_meta or {}).get("timing", {}),
            "internal_errors": (debug_meta or {}).get("internal_errors", []),
        },
    }

    with open(json_path, "w", encoding="utf-8") as fh:
        json.dump(payload, fh, ensure_ascii=False, indent=2)

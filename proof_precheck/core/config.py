# proof_precheck/core/config.py
import copy
import json
from pathlib import Path
from typing import Any, Dict

DEFAULT_SETTINGS: Dict[str, Any] = {
    "service": {
        "host": "127.0.0.1",
        "port": 8765,
        "max_text_chars": 200000,
        "offset_unit": "utf16",
    },
    "engine": {
        "rule_budget_ms": None,
        "disabled_rules": [],
    },
    "report": {
        "context_radius": 60,
    },
}

OFFSET_UNITS = ("codepoint", "utf16")


def _read_json(path: Path) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _merge(base: Dict[str, Any], over: Dict[str, Any]) -> Dict[str, Any]:
    out = copy.deepcopy(base)
    for k, v in over.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _merge(out[k], v)
        else:
            out[k] = v
    return out


def default_config() -> Dict[str, Any]:
    return {"__root": None, "settings": copy.deepcopy(DEFAULT_SETTINGS)}


def load_all(cfg_root: str | None = None) -> Dict[str, Any]:
    """
    Profile folder layout:
      settings.json  -- optional; merged over DEFAULT_SETTINGS key by key
    """
    root = Path(cfg_root) if cfg_root else Path(__file__).resolve().parent.parent / "config"
    if not root.exists():
        raise RuntimeError(f"Config folder not found: {root}")

    cfg: Dict[str, Any] = {}
    cfg["__root"] = str(root)

    p = root / "settings.json"
    try:
        user = _read_json(p) if p.exists() else {}
    except Exception as e:
        raise RuntimeError(f"Cannot read {p}: {e}")
    if not isinstance(user, dict):
        raise RuntimeError(f"{p}: expected a JSON object")
    cfg["settings"] = _merge(DEFAULT_SETTINGS, user)

    unit = cfg["settings"]["service"].get("offset_unit")
    if unit not in OFFSET_UNITS:
        raise RuntimeError(f"{p}: service.offset_unit must be one of {OFFSET_UNITS}, got {unit!r}")

    disabled = cfg["settings"]["engine"].get("disabled_rules")
    if disabled is not None and (not isinstance(disabled, list) or not all(isinstance(r, str) for r in disabled)):
        raise RuntimeError(f"{p}: engine.disabled_rules must be a list of rule ids, got {disabled!r}")

    budget = cfg["settings"]["engine"].get("rule_budget_ms")
    if budget is not None and (isinstance(budget, bool) or not isinstance(budget, (int, float)) or budget < 0):
        raise RuntimeError(f"{p}: engine.rule_budget_ms must be null or a non-negative number, got {budget!r}")

    return cfg

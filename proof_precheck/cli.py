# proof_precheck/cli.py
from __future__ import annotations

import os
import sys
import glob
import argparse
import logging
from typing import Iterable, List

from .core.checks.lexicon import synonyms
from .core.config import load_all
from .core.constants import VERSION as APP_VERSION
from .core.engine import analyze_file
from .core.loader import TEXT_EXTENSIONS
from .core.reporting import calc_gate, write_reports
from .core.watcher import watch_folder


# ------------------------------- utils --------------------------------- #

def _fmt_debug(debug_meta: dict, file_hint: str = "") -> str:
    timing = debug_meta.get("timing", {})
    errs = debug_meta.get("internal_errors", [])
    line = (
        f"[DEBUG] rules={timing.get('rules_ms', 0)}ms "
        f"lexicon={timing.get('lexicon_ms', 0)}ms "
        f"total={timing.get('total_ms', 0)}ms "
        f"internal_errors={len(errs)}"
        + (f"  file: {os.path.basename(file_hint)}" if file_hint else "")
    )
    return "\n".join([line] + [f"[DEBUG]   {e}" for e in errs])


def _enumerate_targets(paths: Iterable[str], recursive: bool) -> List[str]:
    files: List[str] = []
    patterns = tuple("*" + ext for ext in TEXT_EXTENSIONS)
    for p in paths:
        # masks straight from the command line: *.txt etc.
        if any(ch in p for ch in "*?[]"):
            files.extend(glob.glob(p, recursive=recursive))
            continue

        if os.path.isdir(p):
            if recursive:
                for ext in patterns:
                    files.extend(glob.glob(os.path.join(p, "**", ext), recursive=True))
            else:
                for ext in patterns:
                    files.extend(glob.glob(os.path.join(p, ext)))
        else:
            files.append(p)
    return sorted(dict.fromkeys(files))


def _check_one(path: str, cfg: dict, debug: bool, tag: str = "OK") -> int:
    text, findings, by_cat, debug_meta = analyze_file(path, cfg)
    gate = calc_gate(findings)
    write_reports(path, text, findings, by_cat, gate, APP_VERSION, debug_meta, cfg)

    base, _ = os.path.splitext(path)
    print(
        f"[{tag}] {path} => {base}.rep / {base}.rep.json | "
        f"Errors: {gate['errors']}; Warnings: {gate['warnings']}; "
        f"gate: {'PASS' if gate['pass'] else 'BLOCK'}"
    )
    if debug or debug_meta.get("internal_errors"):
        print(_fmt_debug(debug_meta, file_hint=path))
    return 2 if gate["errors"] else 0


# ------------------------------ commands -------------------------------- #

def do_check(paths, cfg_root=None, recursive=False, debug=False) -> int:
    cfg = load_all(cfg_root)
    files = _enumerate_targets(paths, recursive)

    if not files:
        print("No files to check")
        return 4

    rc = 0
    for f in files:
        try:
            rc = max(rc, _check_one(f, cfg, debug))
        except Exception as e:
            print(f"[ERR] {f}: {e}")
            rc = 3
    return rc


def do_watch(folder: str, cfg_root=None, interval: float = 2.0, debug=False, max_rounds=None) -> None:
    cfg = load_all(cfg_root)

    def on_file(path: str):
        try:
            _check_one(path, cfg, debug, tag="WATCH")
        except Exception as e:
            print(f"[WATCH-ERR] {path}: {e}")

    print(f"Watching {folder} (every {interval}s) ...")
    watch_folder(folder, on_file, interval=interval, max_rounds=max_rounds)


def do_synonyms(word: str) -> int:
    alts = synonyms(word)
    if not alts:
        print(f"No alternatives for {word!r}")
        return 1
    for a in alts:
        print(a)
    return 0


def do_serve(cfg_root=None, host=None, port=None) -> None:
    from .service import serve  # lazy import
    serve(load_all(cfg_root), host=host, port=port)


# -------------------------------- main ---------------------------------- #

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="proof-precheck",
        description=f"Grammar, spelling and style precheck for plain text (v{APP_VERSION}, offline)"
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Log engine internals to stderr")
    sub = ap.add_subparsers(dest="cmd", required=True)

    ap_check = sub.add_parser("check", help="Check files or folders (.txt/.md)")
    ap_check.add_argument("paths", nargs="+", help="Files, folders or masks (*.txt, *.md)")
    ap_check.add_argument("--config", help="Profile folder with settings.json", default=None)
    ap_check.add_argument("--recursive", action="store_true", help="Walk folders recursively")
    ap_check.add_argument("--debug", action="store_true", help="Print timing and internal errors")

    ap_watch = sub.add_parser("watch", help="Watch a folder and re-check changed files")
    ap_watch.add_argument("folder", help="Folder to watch")
    ap_watch.add_argument("--config", help="Profile folder with settings.json", default=None)
    ap_watch.add_argument("--interval", type=float, default=2.0, help="Polling interval (s)")
    ap_watch.add_argument("--debug", action="store_true", help="Print timing and internal errors")

    ap_syn = sub.add_parser("synonyms", help="Show lexicon alternatives for a word")
    ap_syn.add_argument("word")

    ap_serve = sub.add_parser("serve", help="Run the HTTP analysis service")
    ap_serve.add_argument("--config", help="Profile folder with settings.json", default=None)
    ap_serve.add_argument("--host", default=None)
    ap_serve.add_argument("--port", type=int, default=None)
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "check":
        sys.exit(do_check(args.paths, cfg_root=args.config, recursive=args.recursive, debug=args.debug))

    if args.cmd == "watch":
        do_watch(args.folder, cfg_root=args.config, interval=args.interval, debug=args.debug)
        return

    if args.cmd == "synonyms":
        sys.exit(do_synonyms(args.word))

    if args.cmd == "serve":
        do_serve(cfg_root=args.config, host=args.host, port=args.port)


if __name__ == "__main__":
    main()

import json
import os

import pytest

from proof_precheck import cli
from proof_precheck.core.watcher import scan_once


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


class TestCheck:
    def test_errors_block_the_gate(self, tmp_path, capsys):
        src = _write(tmp_path / "draft.txt", "I alot of work.")
        assert cli.do_check([str(src)]) == 2

        out = capsys.readouterr().out
        assert "Errors: 1; Warnings: 0; gate: BLOCK" in out

        rep = (tmp_path / "draft.rep").read_text(encoding="utf-8")
        assert "== spelling (1) ==" in rep
        assert "[ERROR][ALOT] @ 1:3 'alot'" in rep

        payload = json.loads((tmp_path / "draft.rep.json").read_text(encoding="utf-8"))
        assert payload["findings_total"] == 1
        assert payload["findings_by_category"] == {"spelling": 1}
        assert payload["rule_stats"] == {"ALOT": 1}
        assert payload["findings"][0]["rule_id"] == "ALOT"
        assert payload["gate"] == {"errors": 1, "warnings": 0, "pass": False}

    def test_warnings_only_pass(self, tmp_path):
        src = _write(tmp_path / "note.md", "This is really nice.")
        assert cli.do_check([str(src)]) == 0
        rep = (tmp_path / "note.rep").read_text(encoding="utf-8")
        assert "== style (1) ==" in rep
        assert "gate: PASS" in rep

    def test_folder_and_mask(self, tmp_path):
        _write(tmp_path / "a.txt", "fine text")
        sub = tmp_path / "sub"
        sub.mkdir()
        _write(sub / "b.txt", "fine text")
        assert cli._enumerate_targets([str(tmp_path)], recursive=False) == [str(tmp_path / "a.txt")]
        assert cli._enumerate_targets([str(tmp_path)], recursive=True) == sorted(
            [str(tmp_path / "a.txt"), str(sub / "b.txt")]
        )
        assert cli._enumerate_targets([str(tmp_path / "*.txt")], recursive=False) == [str(tmp_path / "a.txt")]

    def test_no_input(self, tmp_path, capsys):
        assert cli.do_check([str(tmp_path / "*.txt")]) == 4
        assert "No files to check" in capsys.readouterr().out

    def test_unsupported_file(self, tmp_path, capsys):
        src = _write(tmp_path / "doc.docx", "binary")
        assert cli.do_check([str(src)]) == 3
        assert "[ERR]" in capsys.readouterr().out

    def test_main_exit_code(self, tmp_path):
        src = _write(tmp_path / "draft.txt", "We could of won.")
        with pytest.raises(SystemExit) as exc:
            cli.main(["check", str(src)])
        assert exc.value.code == 2


class TestSynonymsCommand:
    def test_prints_alternatives(self, capsys):
        assert cli.do_synonyms("Important") == 0
        assert capsys.readouterr().out.split() == ["significant", "crucial", "vital", "essential"]

    def test_unknown_word(self, capsys):
        with pytest.raises(SystemExit) as exc:
            cli.main(["synonyms", "zebra"])
        assert exc.value.code == 1
        assert "No alternatives" in capsys.readouterr().out


class TestWatch:
    def test_scan_once_fires_on_new_and_modified(self, tmp_path):
        src = _write(tmp_path / "draft.txt", "alot")
        _write(tmp_path / "ignored.csv", "alot")
        seen, hits = {}, []
        assert scan_once(str(tmp_path), hits.append, seen) == 1
        assert scan_once(str(tmp_path), hits.append, seen) == 0
        st = os.stat(src)
        os.utime(src, (st.st_atime, st.st_mtime + 10))
        assert scan_once(str(tmp_path), hits.append, seen) == 1
        assert hits == [str(src), str(src)]

    def test_watch_writes_reports(self, tmp_path, capsys):
        _write(tmp_path / "draft.txt", "should of")
        cli.do_watch(str(tmp_path), interval=0, max_rounds=1)
        assert (tmp_path / "draft.rep.json").exists()
        assert "[WATCH]" in capsys.readouterr().out

from proof_precheck.core.finding import Finding
from proof_precheck.core.engine import analyze
from proof_precheck.core.utils import apply_suggestion, context_slice, line_col, to_utf16


def _finding(start, end, suggestion, original="", category="grammar", alternatives=None):
    return Finding(category, original, suggestion, "x", start, end, alternatives)


class TestApplySuggestion:
    def test_replaces_span(self):
        f = _finding(0, 9, "should have", "should of")
        assert apply_suggestion("should of gone", f) == "should have gone"

    def test_empty_suggestion_deletes(self):
        text = "It is really good"
        [filler] = [f for f in analyze(text) if f.rule_id == "FILLER_WORD"]
        assert apply_suggestion(text, filler) == "It is good"

    def test_chosen_alternative(self):
        text = "He said it."
        [said] = analyze(text)
        assert apply_suggestion(text, said, said.alternatives[0]) == "He stated it."

    def test_does_not_touch_the_finding(self):
        f = _finding(0, 4, "a lot", "alot", "spelling")
        apply_suggestion("alot", f)
        assert (f.start, f.end, f.suggestion) == (0, 4, "a lot")


class TestToUtf16:
    def test_ascii_text_unchanged(self):
        found = analyze("alot")
        assert to_utf16("alot", found) == found

    def test_offsets_shift_after_astral_characters(self):
        text = "\U0001F600 alot \U0001F600 alot"
        spans = [(f.start, f.end) for f in to_utf16(text, analyze(text))]
        assert spans == [(3, 7), (11, 15)]

    def test_offsets_before_astral_characters_kept(self):
        text = "alot \U0001F600"
        [f] = to_utf16(text, analyze(text))
        assert (f.start, f.end, f.original_text) == (0, 4, "alot")

    def test_bmp_characters_count_once(self):
        text = "café alot"
        [f] = to_utf16(text, analyze(text))
        assert (f.start, f.end) == (5, 9)


class TestPositions:
    def test_line_col(self):
        assert line_col("ab", 0) == (1, 1)
        assert line_col("ab\ncd", 3) == (2, 1)
        assert line_col("ab\ncd", 4) == (2, 2)

    def test_context_slice(self):
        assert context_slice("one\ntwo three", 4, radius=3) == "ne two"


class TestFindingPayload:
    def test_alternatives_only_when_present(self):
        plain = _finding(0, 4, "a lot", "alot", "spelling").to_dict()
        assert "alternatives" not in plain
        assert plain == {
            "category": "spelling",
            "originalText": "alot",
            "suggestion": "a lot",
            "explanation": "x",
            "start": 0,
            "end": 4,
        }
        alts = _finding(0, 4, "good", "good", "style", ("fine",)).to_dict()
        assert alts["alternatives"] == ["fine"]

    def test_severity(self):
        assert _finding(0, 1, "", category="spelling").severity == "error"
        assert _finding(0, 1, "", category="clarity").severity == "warning"

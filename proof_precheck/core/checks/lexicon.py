# proof_precheck/core/checks/lexicon.py
from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping, Tuple

from ..constants import CATEGORY, RID
from ..finding import Finding
from ..regexes import RE_WORD_TOKEN, whole_word

EXPLANATION = "Consider using a more specific word"

# lowercase word -> alternatives, in the order they are offered
LEXICON: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "good": ("excellent", "great", "fine", "wonderful", "superb"),
    "bad": ("poor", "unfavorable", "negative", "inferior"),
    "big": ("large", "substantial", "considerable", "significant"),
    "small": ("tiny", "minor", "compact", "modest"),
    "happy": ("joyful", "delighted", "pleased", "content"),
    "sad": ("unhappy", "sorrowful", "melancholy", "dejected"),
    "important": ("significant", "crucial", "vital", "essential"),
    "said": ("stated", "mentioned", "remarked", "expressed", "noted"),
})


def synonyms(word: str) -> List[str]:
    return list(LEXICON.get(word.lower(), ()))


def suggest(text: str) -> List[Finding]:
    """One style finding per occurrence of every lexicon word in ``text``.

    Tokens are visited in order of first appearance. Each distinct spelling
    ("Good", "good") is re-scanned on its own, case-sensitively, so every
    occurrence is reported exactly once.
    """
    out: List[Finding] = []
    tokens = dict.fromkeys(m.group(0) for m in RE_WORD_TOKEN.finditer(text))
    for token in tokens:
        alternatives = LEXICON.get(token.lower())
        if alternatives is None:
            continue
        for m in whole_word(token).finditer(text):
            out.append(Finding(
                CATEGORY["STYLE"], token, token, EXPLANATION,
                m.start(), m.end(), alternatives, RID["LEXICON_SYNONYM"],
            ))
    return out

# proof_precheck/core/checks/rules.py
from __future__ import annotations

import logging
import re
import time
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from ..constants import CATEGORY, RID
from ..finding import Finding
from ..regexes import (
    RE_THEIR_IS,
    RE_YOUR_VERB,
    RE_ITS_A_THING,
    RE_FILLER,
    RE_SHOULD_OF,
    RE_COULD_OF,
    RE_ALOT,
    RE_COMMA_SPLICE,
    RE_TRANSITION_WORD,
    RE_LOWER_AFTER_STOP,
    RE_THEIR,
    RE_YOUR,
)

logger = logging.getLogger(__name__)

_clock = time.monotonic


class RuleTimeout(RuntimeError):
    pass


@dataclass(frozen=True)
class Rule:
    rule_id: str
    pattern: re.Pattern[str]
    category: str
    explanation: str
    suggest: Callable[[str], str]
    alternatives: Optional[Tuple[str, ...]] = None


def _keep(match: str) -> str:
    return match


def _comma_to_period(match: str) -> str:
    return match.replace(",", ".", 1)


def _capitalize_after_stop(match: str) -> str:
    # "?x" -> "?X"
    return match[0] + match[1].upper()


# Order matters only for ties in the merged output.
RULES: Tuple[Rule, ...] = (
    Rule(
        RID["THEIR_IS"], RE_THEIR_IS, CATEGORY["GRAMMAR"],
        'Use "there is" instead of "their is"',
        lambda m: RE_THEIR.sub("there", m, count=1),
    ),
    Rule(
        RID["YOUR_YOURE"], RE_YOUR_VERB, CATEGORY["GRAMMAR"],
        'Use "you\'re" (you are) instead of "your"',
        lambda m: RE_YOUR.sub("you're", m, count=1),
    ),
    Rule(
        RID["ITS_A_THING"], RE_ITS_A_THING, CATEGORY["CLARITY"],
        "Consider being more specific",
        _keep,
        ("This is important", "This matters", "This is significant"),
    ),
    Rule(
        RID["FILLER_WORD"], RE_FILLER, CATEGORY["STYLE"],
        "Consider removing filler words for stronger writing",
        lambda m: "",
    ),
    Rule(
        RID["SHOULD_OF"], RE_SHOULD_OF, CATEGORY["GRAMMAR"],
        'Use "should have" instead of "should of"',
        lambda m: "should have",
    ),
    Rule(
        RID["COULD_OF"], RE_COULD_OF, CATEGORY["GRAMMAR"],
        'Use "could have" instead of "could of"',
        lambda m: "could have",
    ),
    Rule(
        RID["ALOT"], RE_ALOT, CATEGORY["SPELLING"],
        'Correct spelling is "a lot" (two words)',
        lambda m: "a lot",
    ),
    Rule(
        RID["COMMA_SPLICE"], RE_COMMA_SPLICE, CATEGORY["PUNCT"],
        "Consider using a period or semicolon before starting a new sentence",
        _comma_to_period,
    ),
    Rule(
        RID["TRANSITION_COMMA"], RE_TRANSITION_WORD, CATEGORY["PUNCT"],
        "Transition words at the start of a sentence should be followed by a comma",
        lambda m: m.strip() + ", ",
    ),
    Rule(
        RID["SENTENCE_CAPITAL"], RE_LOWER_AFTER_STOP, CATEGORY["GRAMMAR"],
        "Start new sentence with a capital letter",
        _capitalize_after_stop,
    ),
)


def match_rule(rule: Rule, text: str, budget_ms: Optional[float] = None) -> List[Finding]:
    """All non-overlapping matches of one rule, left to right.

    Raises RuleTimeout once the scan has run longer than ``budget_ms``; the
    caller then drops everything this rule produced for the text.
    """
    out: List[Finding] = []
    limit = budget_ms / 1000.0 if budget_ms else None
    t0 = _clock()
    for m in rule.pattern.finditer(text):
        original = m.group(0)
        if original:
            out.append(Finding(
                rule.category, original, rule.suggest(original), rule.explanation,
                m.start(), m.end(), rule.alternatives, rule.rule_id,
            ))
        if limit is not None and _clock() - t0 > limit:
            raise RuleTimeout(f"exceeded {budget_ms:g} ms budget")
    return out


def match(text: str,
          rules: Sequence[Rule] = RULES,
          budget_ms: Optional[float] = None,
          disabled: Iterable[str] = (),
          errors: Optional[List[str]] = None) -> List[Finding]:
    findings: List[Finding] = []
    skip = set(disabled)
    for rule in rules:
        if rule.rule_id in skip:
            continue
        try:
            findings.extend(match_rule(rule, text, budget_ms))
        except Exception as e:
            logger.warning("rule %s dropped: %s", rule.rule_id, e)
            if errors is not None:
                errors.append(f"rules.{rule.rule_id}: {e}")
    return findings

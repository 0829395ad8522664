# proof_precheck/core/regexes.py
import re

# all patterns use ASCII \w, \b and case folding

# --- tokens ---
RE_WORD_TOKEN = re.compile(r"\w+", re.ASCII)

# --- common confusions ---
RE_THEIR_IS     = re.compile(r"\btheir\s+is\b", re.IGNORECASE | re.ASCII)
RE_YOUR_VERB    = re.compile(r"\byour\s+(going|doing|coming)\b", re.IGNORECASE | re.ASCII)
RE_SHOULD_OF    = re.compile(r"\bshould\s+of\b", re.IGNORECASE | re.ASCII)
RE_COULD_OF     = re.compile(r"\bcould\s+of\b", re.IGNORECASE | re.ASCII)
RE_ALOT         = re.compile(r"\balot\b", re.IGNORECASE | re.ASCII)

# --- vague / filler wording ---
RE_ITS_A_THING  = re.compile(r"\bits\s+a\s+\w+\s+(thing|idea|concept)\b", re.IGNORECASE | re.ASCII)
RE_FILLER       = re.compile(r"\b(very|really|actually)\s+", re.IGNORECASE | re.ASCII)

# --- sentence boundaries (case-sensitive) ---
RE_COMMA_SPLICE     = re.compile(r"\b(,)\s*([A-Z])", re.ASCII)
RE_TRANSITION_WORD  = re.compile(r"\b(However|Therefore|Moreover|Furthermore)\s+", re.ASCII)
RE_LOWER_AFTER_STOP = re.compile(r"([.!?])[a-z]", re.ASCII)

# --- rewrites used by suggestion functions ---
RE_THEIR = re.compile(r"their", re.IGNORECASE | re.ASCII)
RE_YOUR  = re.compile(r"your", re.IGNORECASE | re.ASCII)


def whole_word(word: str) -> "re.Pattern[str]":
    """Case-sensitive whole-word pattern for a literal token."""
    return re.compile(r"\b" + re.escape(word) + r"\b", re.ASCII)

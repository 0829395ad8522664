# proof_precheck/core/constants.py

VERSION = "1.0.0"

SEVERITY_ERROR = "error"
SEVERITY_WARN = "warning"

# closed set of finding categories
CATEGORY = {
    "GRAMMAR": "grammar",
    "SPELLING": "spelling",
    "STYLE": "style",
    "PUNCT": "punctuation",
    "CLARITY": "clarity",
}

CATEGORY_ORDER = ("grammar", "spelling", "style", "punctuation", "clarity")

CATEGORY_SEVERITY = {
    "grammar": SEVERITY_ERROR,
    "spelling": SEVERITY_ERROR,
    "style": SEVERITY_WARN,
    "punctuation": SEVERITY_WARN,
    "clarity": SEVERITY_WARN,
}

# stable rule ids, in evaluation order
RID = {
    "THEIR_IS": "THEIR_IS",
    "YOUR_YOURE": "YOUR_YOURE",
    "ITS_A_THING": "ITS_A_THING",
    "FILLER_WORD": "FILLER_WORD",
    "SHOULD_OF": "SHOULD_OF",
    "COULD_OF": "COULD_OF",
    "ALOT": "ALOT",
    "COMMA_SPLICE": "COMMA_SPLICE",
    "TRANSITION_COMMA": "TRANSITION_COMMA",
    "SENTENCE_CAPITAL": "SENTENCE_CAPITAL",
    "LEXICON_SYNONYM": "LEXICON_SYNONYM",
}

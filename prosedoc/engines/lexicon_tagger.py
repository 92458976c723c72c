"""Lexicon and rule based part-of-speech tagger."""

import re
from types import MappingProxyType
from typing import Mapping, Optional

from ..models import Token
from .base import Tagger


# Closed-class words and frequent irregular forms (Penn Treebank tags)
DEFAULT_LEXICON = {
    # Determiners
    "the": "DT", "a": "DT", "an": "DT", "this": "DT", "that": "DT",
    "these": "DT", "those": "DT", "some": "DT", "any": "DT", "no": "DT",
    "every": "DT", "each": "DT", "all": "DT", "both": "DT", "another": "DT",
    # Pronouns
    "i": "PRP", "you": "PRP", "he": "PRP", "she": "PRP", "it": "PRP",
    "we": "PRP", "they": "PRP", "me": "PRP", "him": "PRP", "us": "PRP",
    "them": "PRP", "myself": "PRP", "himself": "PRP", "herself": "PRP",
    "itself": "PRP", "themselves": "PRP",
    "my": "PRP$", "your": "PRP$", "his": "PRP$", "her": "PRP$", "its": "PRP$",
    "our": "PRP$", "their": "PRP$",
    "who": "WP", "whom": "WP", "what": "WP", "whose": "WP$", "which": "WDT",
    "where": "WRB", "when": "WRB", "why": "WRB", "how": "WRB",
    "there": "EX",
    # Conjunctions and prepositions
    "and": "CC", "or": "CC", "but": "CC", "nor": "CC", "yet": "CC",
    "to": "TO",
    "of": "IN", "in": "IN", "on": "IN", "at": "IN", "by": "IN", "for": "IN",
    "with": "IN", "from": "IN", "into": "IN", "onto": "IN", "about": "IN",
    "over": "IN", "under": "IN", "after": "IN", "before": "IN", "since": "IN",
    "until": "IN", "during": "IN", "through": "IN", "between": "IN",
    "against": "IN", "without": "IN", "within": "IN", "because": "IN",
    "if": "IN", "while": "IN", "than": "IN", "as": "IN", "like": "IN",
    "although": "IN", "though": "IN", "whether": "IN", "upon": "IN",
    # Modals and auxiliaries
    "will": "MD", "would": "MD", "can": "MD", "could": "MD", "shall": "MD",
    "should": "MD", "may": "MD", "might": "MD", "must": "MD", "ca": "MD",
    "wo": "MD", "'ll": "MD", "'d": "MD",
    "be": "VB", "is": "VBZ", "am": "VBP", "are": "VBP", "'re": "VBP",
    "'m": "VBP", "was": "VBD", "were": "VBD", "been": "VBN", "being": "VBG",
    "have": "VBP", "has": "VBZ", "had": "VBD", "'ve": "VBP",
    "do": "VBP", "does": "VBZ", "did": "VBD", "done": "VBN",
    # Frequent irregular verbs
    "go": "VB", "goes": "VBZ", "went": "VBD", "gone": "VBN",
    "say": "VB", "said": "VBD", "get": "VB", "got": "VBD", "make": "VB",
    "made": "VBD", "know": "VB", "knew": "VBD", "known": "VBN", "think": "VB",
    "thought": "VBD", "take": "VB", "took": "VBD", "taken": "VBN",
    "see": "VB", "saw": "VBD", "seen": "VBN", "come": "VB", "came": "VBD",
    "give": "VB", "gave": "VBD", "given": "VBN", "find": "VB", "found": "VBD",
    "tell": "VB", "told": "VBD", "run": "VB", "ran": "VBD", "slept": "VBD",
    "left": "VBD", "felt": "VBD", "kept": "VBD", "began": "VBD", "wrote": "VBD",
    "written": "VBN", "bought": "VBD", "brought": "VBD", "sat": "VBD",
    "stood": "VBD", "met": "VBD", "lost": "VBD", "paid": "VBD", "sent": "VBD",
    # Adverbs and particles
    "not": "RB", "n't": "RB", "very": "RB", "also": "RB", "too": "RB",
    "so": "RB", "just": "RB", "now": "RB", "then": "RB", "here": "RB",
    "never": "RB", "always": "RB", "often": "RB", "again": "RB",
    "already": "RB", "still": "RB", "soon": "RB", "well": "RB",
    "home": "NN", "up": "RP", "out": "RP", "off": "RP", "down": "RP",
    # Adjectives
    "good": "JJ", "new": "JJ", "old": "JJ", "great": "JJ", "big": "JJ",
    "small": "JJ", "long": "JJ", "little": "JJ", "other": "JJ", "same": "JJ",
    "many": "JJ", "much": "JJ", "few": "JJ", "more": "JJR", "most": "JJS",
    "better": "JJR", "best": "JJS",
    # Titles
    "mr.": "NNP", "mrs.": "NNP", "ms.": "NNP", "dr.": "NNP", "prof.": "NNP",
    "st.": "NNP", "jr.": "NNP", "sr.": "NNP",
    "'s": "POS", "'": "POS",
}

PUNCTUATION_TAGS = {
    ".": ".", "!": ".", "?": ".",
    ",": ",", ":": ":", ";": ":", "...": ":", "-": ":", "--": ":",
    "(": "(", "[": "(", "{": "(", ")": ")", "]": ")", "}": ")",
    '"': "``", "“": "``", "”": "''", "`": "``", "‘": "``", "’": "''",
    "$": "$", "£": "$", "€": "$", "#": "#", "%": "NN",
}

# (suffix, tag) pairs checked in order for unknown lowercase words
SUFFIX_RULES = (
    ("ing", "VBG"),
    ("ed", "VBD"),
    ("ly", "RB"),
    ("tion", "NN"),
    ("sion", "NN"),
    ("ment", "NN"),
    ("ness", "NN"),
    ("ity", "NN"),
    ("ship", "NN"),
    ("able", "JJ"),
    ("ible", "JJ"),
    ("ful", "JJ"),
    ("ous", "JJ"),
    ("ive", "JJ"),
    ("less", "JJ"),
    ("ical", "JJ"),
    ("ic", "JJ"),
    ("al", "JJ"),
    ("est", "JJS"),
    ("ize", "VB"),
    ("ise", "VB"),
)

SUBJECT_TAGS = {"PRP", "NNP", "NNPS", "NN", "NNS", "WP"}
SENTENCE_FINAL = {".", "!", "?"}


class LexiconTagger(Tagger):
    """Tags tokens from a lexicon, falling back to shape and suffix rules.

    Lookup order for each token: punctuation, lexicon (case-insensitive),
    numbers, capitalisation, suffix rules, and finally NN. A few contextual
    rules use the tag of the previous token (e.g. "-s" after a subject is
    VBZ, after a determiner it is NNS).
    """

    def __init__(self, lexicon: Optional[Mapping[str, str]] = None):
        """Initialize lexicon tagger.

        Args:
            lexicon: Extra word -> tag entries; keys are matched lowercase and
                override the built-in lexicon
        """
        merged = dict(DEFAULT_LEXICON)
        if lexicon:
            merged.update({word.lower(): tag for word, tag in lexicon.items()})
        self.lexicon = MappingProxyType(merged)
        self.number_pattern = re.compile(r"^[+-]?\$?\d[\d.,:/]*%?$|^\d+(?:st|nd|rd|th)$")

    def tag_word(self, word: str, previous_tag: Optional[str], sentence_start: bool,
                 next_word: Optional[str] = None) -> str:
        """Choose a tag for a single word.

        Args:
            word: Token text
            previous_tag: Tag of the preceding token, if any
            sentence_start: Whether the token opens a sentence
            next_word: Text of the following token, if any

        Returns:
            Part-of-speech tag
        """
        if word in PUNCTUATION_TAGS:
            return PUNCTUATION_TAGS[word]

        lowered = word.lower()
        if lowered in self.lexicon:
            tag = self.lexicon[lowered]
            if tag == "VB" and previous_tag in SUBJECT_TAGS:
                return "VBP"
            return tag

        if self.number_pattern.match(word):
            return "CD"

        if word and word[0].isupper():
            if not sentence_start:
                return "NNP"
            # Sentence-initial capitals are only proper nouns inside a name
            if next_word and next_word[0].isupper() and next_word.lower() not in self.lexicon:
                return "NNP"

        if "-" in word.strip("-"):
            return "JJ"

        for suffix, tag in SUFFIX_RULES:
            if lowered.endswith(suffix) and len(lowered) > len(suffix) + 2:
                if tag == "VBD" and previous_tag in {"VBZ", "VBP", "VBD"}:
                    return "VBN"
                return tag

        if lowered.endswith("s") and not lowered.endswith("ss") and len(lowered) > 3:
            if previous_tag in SUBJECT_TAGS:
                return "VBZ"
            return "NNS"

        if previous_tag in {"PRP", "MD", "TO"}:
            return "VB" if previous_tag in {"MD", "TO"} else "VBP"

        return "NN"

    def tag(self, tokens: list[Token]) -> list[Token]:
        """Tag tokens in place.

        Args:
            tokens: Tokens in document order (may be empty)

        Returns:
            The same list, every token with `tag` set
        """
        previous_tag = None
        sentence_start = True
        for index, token in enumerate(tokens):
            next_word = tokens[index + 1].text if index + 1 < len(tokens) else None
            token.tag = self.tag_word(token.text, previous_tag, sentence_start, next_word)
            previous_tag = token.tag
            if token.text in SENTENCE_FINAL:
                sentence_start = True
            elif token.tag not in {"``", "("}:
                sentence_start = False
        return tokens

"""Regex-based sentence segmentation engine."""

import re
from typing import Iterable, Optional

from ..models import Sentence
from .base import (
    ABBREVIATIONS,
    CLOSING_PUNCTUATION,
    SENTENCE_TERMINATORS,
    TOKEN_PREFIXES,
    Segmenter,
    is_abbreviation,
)


class RegexSegmenter(Segmenter):
    """Rule-based segmenter for English prose.

    A sentence ends at a run of terminators (plus any closing quotes or
    brackets) followed by whitespace or the end of the text, unless:
    - the period belongs to an abbreviation or an initial ("Dr.", "J.")
    - the next word starts with a lowercase letter
    """

    def __init__(self, abbreviations: Optional[Iterable[str]] = None):
        """Initialize regex segmenter.

        Args:
            abbreviations: Abbreviations (lowercase, without the period) that
                do not end a sentence; defaults to the built-in list
        """
        self.abbreviations = frozenset(
            ABBREVIATIONS if abbreviations is None else abbreviations
        )
        self.boundary_pattern = re.compile(
            f"[{re.escape(SENTENCE_TERMINATORS)}]+"
            f"[{re.escape(CLOSING_PUNCTUATION)}]*"
            r"(?=\s|$)"
        )
        self.next_char_pattern = re.compile(r"\s*(\S)")

    def get_last_word(self, text: str, end: int) -> str:
        """Extract the whitespace-delimited word ending at `end`.

        Args:
            text: Full text
            end: Exclusive end offset of the word

        Returns:
            The word, without leading quotes or brackets
        """
        start = end
        while start > 0 and not text[start - 1].isspace():
            start -= 1
        return text[start:end].lstrip(TOKEN_PREFIXES)

    def get_next_char(self, text: str, start: int) -> str:
        """Return the first non-space character at or after `start` ("" at end)."""
        match = self.next_char_pattern.match(text, start)
        return match.group(1) if match else ""

    def should_split(self, text: str, match: re.Match) -> bool:
        """Determine if a terminator match ends a sentence.

        Args:
            text: Full text
            match: Boundary pattern match

        Returns:
            True if the sentence ends after the match
        """
        next_char = self.get_next_char(text, match.end())
        if not next_char:
            return True

        terminators = match.group().rstrip(CLOSING_PUNCTUATION)
        if terminators == ".":
            word = self.get_last_word(text, match.start()) + "."
            if is_abbreviation(word, self.abbreviations):
                return False

        # Continuation in lowercase: "Wait... what?" or "he said. and then"
        if next_char.islower():
            return False

        return True

    def segment(self, text: str) -> list[Sentence]:
        """Segment text into sentences.

        Args:
            text: Input text to segment

        Returns:
            Sentences with offsets into `text`; whitespace between sentences
            is not part of any sentence
        """
        if not text:
            return []

        sentences = []
        cursor = 0
        for match in self.boundary_pattern.finditer(text):
            if match.end() <= cursor or not self.should_split(text, match):
                continue
            self._append(sentences, text, cursor, match.end())
            cursor = match.end()

        self._append(sentences, text, cursor, len(text))
        return sentences

    @staticmethod
    def _append(sentences: list[Sentence], text: str, start: int, end: int) -> None:
        while start < end and text[start].isspace():
            start += 1
        while end > start and text[end - 1].isspace():
            end -= 1
        if start < end:
            sentences.append(Sentence(text=text[start:end], start=start, end=end))

"""Iterative rule-based tokenizer."""

import re

from ..models import Token
from .base import (
    ABBREVIATIONS,
    CONTRACTIONS,
    EMOTICONS,
    TOKEN_PREFIXES,
    TOKEN_SUFFIXES,
    Tokenizer,
    is_abbreviation,
)


class IterTokenizer(Tokenizer):
    """Tokenizer that splits on whitespace and then peels punctuation.

    Each whitespace-delimited chunk is processed iteratively: prefix
    characters are split off the front, suffix characters and contractions
    off the back, until nothing more can be removed. Abbreviations,
    ellipses, URLs, e-mail addresses and emoticons are kept whole.
    """

    def __init__(self):
        """Initialize iterative tokenizer."""
        self.chunk_pattern = re.compile(r"\S+")
        self.url_pattern = re.compile(
            r"^(?:https?://|www\.)\S*[\w/]$|^[\w.+-]+@[\w-]+(?:\.[\w-]+)+$",
            re.IGNORECASE,
        )
        self.number_pattern = re.compile(r"^[+-]?\d+(?:[.,:/]\d+)*$")

    def is_atomic(self, chunk: str) -> bool:
        """Check if a chunk must not be split any further.

        Args:
            chunk: Candidate token text

        Returns:
            True for emoticons, URLs, e-mails, numbers and abbreviations
        """
        if chunk in EMOTICONS or chunk == "...":
            return True
        if self.url_pattern.match(chunk) or self.number_pattern.match(chunk):
            return True
        return is_abbreviation(chunk, ABBREVIATIONS)

    def split_chunk(self, chunk: str, offset: int) -> list[tuple[str, int]]:
        """Split one whitespace-delimited chunk into (text, start) pieces.

        Args:
            chunk: Chunk text
            offset: Start offset of the chunk in the document

        Returns:
            Token texts with their start offsets, in order
        """
        front = []
        back = []
        while len(chunk) > 1 and not self.is_atomic(chunk):
            if chunk[0] in TOKEN_PREFIXES:
                front.append((chunk[0], offset))
                chunk = chunk[1:]
                offset += 1
                continue

            if chunk.endswith("...") and len(chunk) > 3:
                back.append(("...", offset + len(chunk) - 3))
                chunk = chunk[:-3]
                continue

            if chunk[-1] in TOKEN_SUFFIXES:
                back.append((chunk[-1], offset + len(chunk) - 1))
                chunk = chunk[:-1]
                continue

            contraction = self._match_contraction(chunk)
            if contraction:
                back.append(
                    (chunk[-len(contraction):], offset + len(chunk) - len(contraction))
                )
                chunk = chunk[: -len(contraction)]
                continue

            break

        if chunk:
            front.append((chunk, offset))
        return front + back[::-1]

    @staticmethod
    def _match_contraction(chunk: str) -> str:
        lowered = chunk.lower().replace("’", "'")
        for contraction in CONTRACTIONS:
            if lowered.endswith(contraction) and len(chunk) > len(contraction):
                return contraction
        return ""

    def tokenize(self, text: str) -> list[Token]:
        """Tokenize text.

        Args:
            text: Input text

        Returns:
            Untagged tokens with offsets into `text`
        """
        tokens = []
        for match in self.chunk_pattern.finditer(text):
            for piece, start in self.split_chunk(match.group(), match.start()):
                tokens.append(Token(text=piece, start=start, end=start + len(piece)))
        return tokens

"""Gazetteer-based named-entity extraction engine."""

from types import MappingProxyType
from typing import Mapping, Optional

from ..models import Entity, Token
from .base import HONORIFICS, EntityExtracter


DEFAULT_GAZETTEER = {
    # Places
    "London": "GPE", "Paris": "GPE", "Berlin": "GPE", "Rome": "GPE",
    "Madrid": "GPE", "Tokyo": "GPE", "Beijing": "GPE", "Moscow": "GPE",
    "New York": "GPE", "Los Angeles": "GPE", "San Francisco": "GPE",
    "Chicago": "GPE", "Boston": "GPE", "Washington": "GPE", "Toronto": "GPE",
    "Sydney": "GPE", "England": "GPE", "France": "GPE", "Germany": "GPE",
    "Italy": "GPE", "Spain": "GPE", "China": "GPE", "Japan": "GPE",
    "India": "GPE", "Russia": "GPE", "Canada": "GPE", "Australia": "GPE",
    "America": "GPE", "United States": "GPE", "United Kingdom": "GPE",
    "Europe": "LOC", "Asia": "LOC", "Africa": "LOC",
    # Organizations
    "Google": "ORG", "Microsoft": "ORG", "Apple": "ORG", "Amazon": "ORG",
    "United Nations": "ORG", "European Union": "ORG", "NASA": "ORG",
}

ORG_SUFFIXES = {"inc.", "inc", "corp.", "corp", "ltd.", "ltd", "co.", "llc", "company", "corporation"}

PROPER_NOUN_TAGS = {"NNP", "NNPS"}


class GazetteerExtracter(EntityExtracter):
    """Groups runs of proper nouns into entities and labels them.

    Labels come from, in order: the gazetteer (full span), an honorific
    before the span (PERSON), a corporate suffix ending the span (ORG),
    the gazetteer entry of the span's last word, and finally MISC.
    """

    def __init__(self, gazetteer: Optional[Mapping[str, str]] = None):
        """Initialize gazetteer extracter.

        Args:
            gazetteer: Extra "name -> label" entries that extend the built-in
                gazetteer
        """
        merged = dict(DEFAULT_GAZETTEER)
        if gazetteer:
            merged.update(gazetteer)
        self.gazetteer = MappingProxyType(merged)

    def find_spans(self, tokens: list[Token]) -> list[tuple[int, int]]:
        """Find runs of proper-noun tokens.

        Args:
            tokens: Tagged tokens

        Returns:
            (first, last) token index pairs, last exclusive
        """
        spans = []
        start = None
        for index, token in enumerate(tokens):
            if token.tag in PROPER_NOUN_TAGS:
                if start is None:
                    start = index
            elif start is not None:
                spans.append((start, index))
                start = None
        if start is not None:
            spans.append((start, len(tokens)))
        return spans

    def label_span(self, name: str, words: list[str], after_honorific: bool) -> str:
        """Choose a label for an entity span.

        Args:
            name: Entity text
            words: Token texts of the span
            after_honorific: Whether the span was introduced by a title

        Returns:
            Entity label
        """
        if name in self.gazetteer:
            return self.gazetteer[name]
        if after_honorific:
            return "PERSON"
        if words[-1].lower() in ORG_SUFFIXES:
            return "ORG"
        if words[-1] in self.gazetteer:
            return self.gazetteer[words[-1]]
        return "MISC"

    def classify(self, tokens: list[Token]) -> list[Entity]:
        """Label tokens with IOB entity labels and return the entities.

        Args:
            tokens: Tagged tokens; untagged tokens never start an entity

        Returns:
            Entities in document order
        """
        for token in tokens:
            token.label = "O"

        entities = []
        for first, last in self.find_spans(tokens):
            after_honorific = False
            # Leading titles are not part of the name: "Dr. Smith" -> "Smith"
            while first < last and tokens[first].text.lower().rstrip(".") in HONORIFICS:
                after_honorific = True
                first += 1
            if first == last:
                continue

            span = tokens[first:last]
            start, end = span[0].start, span[-1].end
            words = [token.text for token in span]
            name = " ".join(words)
            label = self.label_span(name, words, after_honorific)

            for position, token in enumerate(span):
                token.label = f"{'B' if position == 0 else 'I'}-{label}"
            entities.append(Entity(text=name, label=label, start=start, end=end))

        return entities

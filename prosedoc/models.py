"""Data models for documents."""

from dataclasses import asdict, dataclass
from typing import Optional


@dataclass(frozen=True)
class Sentence:
    """A sentence span over the document text."""

    text: str
    start: int  # character offset, inclusive
    end: int  # character offset, exclusive

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Token:
    """A token span over the document text.

    `tag` is filled in by the tagging stage and `label` (IOB entity label) by
    the extraction stage; both stay None when those stages do not run.
    """

    text: str
    start: int
    end: int
    tag: Optional[str] = None
    label: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Entity:
    """A named entity span over the document text."""

    text: str
    label: str
    start: int
    end: int

    def to_dict(self) -> dict:
        return asdict(self)

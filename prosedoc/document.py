"""Document construction: option resolution and stage orchestration."""

import logging
from dataclasses import replace
from typing import Callable, Iterable, TypeVar

from .config import Configuration
from .errors import ConfigurationError, StageError
from .model import Model, default_model
from .models import Entity, Sentence, Token
from .options import Option, apply_options

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Document:
    """A parsed body of text.

    Documents are built by `new_document` and are read-only afterwards:
    accessors return copies, so callers cannot change a document's state.
    """

    __slots__ = ("_text", "_model", "_sentences", "_tokens", "_entities")

    def __init__(
        self,
        text: str,
        model: Model,
        sentences: Iterable[Sentence] = (),
        tokens: Iterable[Token] = (),
        entities: Iterable[Entity] = (),
    ):
        self._text = text
        self._model = model
        self._sentences = tuple(sentences)
        self._tokens = tuple(tokens)
        self._entities = tuple(entities)

    @property
    def text(self) -> str:
        """The original input text."""
        return self._text

    @property
    def model(self) -> Model:
        """The model used to build this document."""
        return self._model

    def tokens(self) -> list[Token]:
        """Return copies of the document's tokens."""
        return [replace(token) for token in self._tokens]

    def sentences(self) -> list[Sentence]:
        """Return the document's sentences."""
        return list(self._sentences)

    def entities(self) -> list[Entity]:
        """Return the document's named entities."""
        return list(self._entities)

    def to_dict(self) -> dict:
        """Convert to dictionary for output."""
        return {
            "text": self._text,
            "model": self._model.name,
            "sentences": [sentence.to_dict() for sentence in self._sentences],
            "tokens": [token.to_dict() for token in self._tokens],
            "entities": [entity.to_dict() for entity in self._entities],
        }

    def __repr__(self) -> str:
        return (
            f"Document(model={self._model.name!r}, sentences={len(self._sentences)}, "
            f"tokens={len(self._tokens)}, entities={len(self._entities)})"
        )


def _run_stage(stage: str, func: Callable[..., T], *args) -> T:
    """Invoke a collaborator, wrapping any failure in a StageError."""
    logger.debug(f"Running {stage} stage")
    try:
        return func(*args)
    except Exception as e:
        raise StageError(stage, e) from e


def resolve_model(config: Configuration) -> Model:
    """Pick the model for a configuration.

    Args:
        config: Resolved configuration

    Returns:
        The installed model, or the default model for the requested stages

    Raises:
        ConfigurationError: If an installed model cannot tag but tagging is
            requested
    """
    if config.model is None:
        return default_model(tagging=config.tag, extraction=config.extract)

    if config.tag and config.model.tagger is None:
        raise ConfigurationError(
            f"Model {config.model.name!r} has no tagger but tagging is enabled"
        )
    return config.model


def new_document(text: str, *options: Option) -> Document:
    """Create a Document according to the given options.

    Options are applied first, in order; then the enabled stages run in the
    fixed order segment, tokenize, tag, extract. Tagging never turns
    tokenization back on: with no tokenizer the document has no tokens.

    For example,

        doc = new_document("Dr. Smith went home.", WithTagging(False))

    Args:
        text: Input text (may be empty)
        *options: Options to apply

    Returns:
        The fully built document

    Raises:
        TypeError: If `text` is not a string
        ConfigurationError: If an option or the installed model is invalid
        StageError: If a collaborator stage fails
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, got {type(text).__name__}")

    config = apply_options(options)
    model = resolve_model(config)

    sentences: list[Sentence] = []
    tokens: list[Token] = []
    entities: list[Entity] = []

    if config.segment:
        sentences = list(_run_stage("segment", config.segmenter.segment, text))

    if config.tokenizer is not None:
        tokens = list(_run_stage("tokenize", config.tokenizer.tokenize, text))

    if config.tag:
        tagged = list(_run_stage("tag", model.tagger.tag, tokens))
        if len(tagged) != len(tokens):
            raise StageError(
                "tag",
                ValueError(f"tagger returned {len(tagged)} tokens for {len(tokens)} inputs"),
            )
        tokens = tagged

    if config.extract and model.extracter is not None:
        entities = list(_run_stage("extract", model.extracter.classify, tokens))

    return Document(
        text=text,
        model=model,
        sentences=sentences,
        tokens=tokens,
        entities=entities,
    )

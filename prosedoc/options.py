"""Options that change the document creation process.

Each option is an immutable patch value targeting one setting. Options are
applied in order by `apply_options`; when two options target the same
setting the later one wins, and options targeting different settings
commute.

For example, to skip tagging:

    doc = new_document("...", WithTagging(False))
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import reduce
from typing import ClassVar, Iterable, Optional

from .config import DEFAULT_CONFIGURATION, Configuration
from .engines import Segmenter, Tokenizer
from .errors import ConfigurationError
from .model import Model


class Option(ABC):
    """A single configuration patch."""

    setting: ClassVar[str]

    @abstractmethod
    def apply(self, config: Configuration) -> Configuration:
        """Return `config` with this option applied."""
        pass


@dataclass(frozen=True)
class UsingTokenizer(Option):
    """Install a tokenizer; None disables tokenization and every later stage."""

    tokenizer: Optional[Tokenizer]
    setting: ClassVar[str] = "tokenizer"

    def apply(self, config: Configuration) -> Configuration:
        return config.patch(tokenizer=self.tokenizer)


@dataclass(frozen=True)
class WithTokenization(Option):
    """Enable (the default) or disable tokenization.

    Deprecated: use UsingTokenizer instead. Disabling removes the tokenizer;
    enabling installs the default tokenizer only if none is set, so a custom
    tokenizer installed earlier is kept.

    This is the one exception to "the last option wins" for the tokenizer
    setting: `UsingTokenizer(custom), WithTokenization(True)` keeps `custom`
    rather than installing the default tokenizer.
    """

    include: bool
    setting: ClassVar[str] = "tokenizer"

    def apply(self, config: Configuration) -> Configuration:
        if not isinstance(self.include, bool):
            raise ConfigurationError(
                f"WithTokenization expects a bool, got {type(self.include).__name__}"
            )
        if not self.include:
            return config.patch(tokenizer=None)
        if config.tokenizer is None:
            return config.patch(tokenizer=DEFAULT_CONFIGURATION.tokenizer)
        return config


@dataclass(frozen=True)
class WithTagging(Option):
    """Enable (the default) or disable part-of-speech tagging.

    This never changes the tokenizer: tagging without a tokenizer produces no
    tokens.
    """

    include: bool
    setting: ClassVar[str] = "tag"

    def apply(self, config: Configuration) -> Configuration:
        return config.patch(tag=self.include)


@dataclass(frozen=True)
class WithSegmentation(Option):
    """Enable (the default) or disable sentence segmentation."""

    include: bool
    setting: ClassVar[str] = "segment"

    def apply(self, config: Configuration) -> Configuration:
        return config.patch(segment=self.include)


@dataclass(frozen=True)
class WithExtraction(Option):
    """Enable (the default) or disable named-entity extraction."""

    include: bool
    setting: ClassVar[str] = "extract"

    def apply(self, config: Configuration) -> Configuration:
        return config.patch(extract=self.include)


@dataclass(frozen=True)
class UsingSegmenter(Option):
    """Install a sentence segmenter."""

    segmenter: Segmenter
    setting: ClassVar[str] = "segmenter"

    def apply(self, config: Configuration) -> Configuration:
        return config.patch(segmenter=self.segmenter)


@dataclass(frozen=True)
class UsingModel(Option):
    """Install a model, bypassing default-model selection."""

    model: Model
    setting: ClassVar[str] = "model"

    def apply(self, config: Configuration) -> Configuration:
        return config.patch(model=self.model)


def apply_option(config: Configuration, option: Option) -> Configuration:
    """Apply a single option, rejecting anything that is not an Option.

    Args:
        config: Current configuration
        option: Option to apply

    Returns:
        New configuration

    Raises:
        ConfigurationError: If `option` is not an Option or carries an
            invalid value
    """
    if not isinstance(option, Option):
        raise ConfigurationError(f"Not a document option: {option!r}")
    return option.apply(config)


def apply_options(
    options: Iterable[Option], base: Optional[Configuration] = None
) -> Configuration:
    """Fold options, in order, over a copy of the base configuration.

    Args:
        options: Options to apply
        base: Starting configuration (defaults to DEFAULT_CONFIGURATION)

    Returns:
        Resolved configuration
    """
    start = (base if base is not None else DEFAULT_CONFIGURATION).model_copy()
    return reduce(apply_option, options, start)

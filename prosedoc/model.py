"""Models bundling a tagger and an optional entity extracter."""

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from .engines import EntityExtracter, GazetteerExtracter, LexiconTagger, Tagger
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_MODEL_NAME = "en-default"


class ModelSpec(BaseModel):
    """On-disk description of a model."""

    name: str = Field(default="custom", min_length=1)
    tagging: bool = True
    extraction: bool = True
    lexicon: Dict[str, str] = Field(default_factory=dict)
    gazetteer: Dict[str, str] = Field(default_factory=dict)


@dataclass(frozen=True)
class Model:
    """A shared, read-only bundle of pipeline data.

    A model may be reused by any number of documents, including from several
    threads at once; nothing in it is mutated after construction.
    """

    name: str
    tagger: Optional[Tagger] = None
    extracter: Optional[EntityExtracter] = None

    def __post_init__(self):
        """Validate component types."""
        if self.tagger is not None and not isinstance(self.tagger, Tagger):
            raise ConfigurationError(
                f"Model {self.name!r}: tagger must be a Tagger, got {type(self.tagger).__name__}"
            )
        if self.extracter is not None and not isinstance(self.extracter, EntityExtracter):
            raise ConfigurationError(
                f"Model {self.name!r}: extracter must be an EntityExtracter, "
                f"got {type(self.extracter).__name__}"
            )

    @classmethod
    def from_spec(cls, spec: ModelSpec) -> "Model":
        """Build a model from a validated spec."""
        return cls(
            name=spec.name,
            tagger=LexiconTagger(spec.lexicon) if spec.tagging else None,
            extracter=GazetteerExtracter(spec.gazetteer) if spec.extraction else None,
        )

    @classmethod
    def load(cls, path: str | Path) -> "Model":
        """Load a model from a YAML file.

        Args:
            path: Path to a YAML model description

        Returns:
            The loaded model

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigurationError: If the file is not a valid model description
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Model file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(f"Invalid model file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Invalid model file {path}: expected a mapping")

        try:
            spec = ModelSpec(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid model file {path}: {e}") from e

        logger.info(
            f"Loaded model {spec.name!r} ({len(spec.lexicon)} lexicon entries, "
            f"{len(spec.gazetteer)} gazetteer entries)"
        )
        return cls.from_spec(spec)


@lru_cache(maxsize=None)
def default_model(tagging: bool = True, extraction: bool = True) -> Model:
    """Return the shared default model for a stage combination.

    Tagger data is only built when tagging is requested, and the gazetteer
    only when extraction is. Each combination is built once per process.

    Args:
        tagging: Whether the model must provide a tagger
        extraction: Whether the model must provide an entity extracter

    Returns:
        Cached default model
    """
    return Model.from_spec(
        ModelSpec(name=DEFAULT_MODEL_NAME, tagging=tagging, extraction=extraction)
    )

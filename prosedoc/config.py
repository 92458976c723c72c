"""Configuration for document construction and the batch pipeline."""

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    InstanceOf,
    StrictBool,
    ValidationError,
    field_validator,
)

from .engines import IterTokenizer, RegexSegmenter, Segmenter, Tokenizer
from .errors import ConfigurationError
from .model import Model


class Configuration(BaseModel):
    """Settings resolved for a single document construction.

    Records are immutable; options produce new records through `patch`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    segment: StrictBool = True
    tag: StrictBool = True
    extract: StrictBool = True
    tokenizer: Optional[InstanceOf[Tokenizer]] = None
    segmenter: InstanceOf[Segmenter]
    model: Optional[InstanceOf[Model]] = None

    def patch(self, **changes) -> "Configuration":
        """Return a copy with some settings replaced.

        Args:
            **changes: Setting name -> new value

        Returns:
            New, validated configuration

        Raises:
            ConfigurationError: If a value has the wrong type or a setting
                does not exist
        """
        try:
            return type(self)(**{**dict(self), **changes})
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e


DEFAULT_CONFIGURATION = Configuration(
    segment=True,
    tag=True,
    extract=True,
    tokenizer=IterTokenizer(),
    segmenter=RegexSegmenter(),
)


class StageConfig(BaseModel):
    """Which pipeline stages run."""

    segment: bool = True
    tokenize: bool = True
    tag: bool = True
    extract: bool = True

    def to_options(self, model: Optional[Model] = None) -> list:
        """Convert stage settings into document options.

        Args:
            model: Model to install, if any

        Returns:
            Options for `new_document`
        """
        from .options import UsingModel, WithExtraction, WithSegmentation, WithTagging, WithTokenization

        options = [
            WithSegmentation(self.segment),
            WithTokenization(self.tokenize),
            WithTagging(self.tag),
            WithExtraction(self.extract),
        ]
        if model is not None:
            options.append(UsingModel(model))
        return options


class OutputConfig(BaseModel):
    """Configuration for output options."""

    output_dir: Path = Path("data/prosedoc_output")
    format: Literal["csv", "json", "parquet"] = "csv"
    save_sentences: bool = True
    save_tokens: bool = True
    save_entities: bool = True


class PipelineConfig(BaseModel):
    """Main configuration for the batch document pipeline."""

    input_file: Optional[Path] = None
    input_format: Literal["auto", "jsonl", "text"] = "auto"
    model: Optional[Path] = None
    max_documents: Optional[int] = Field(default=None, ge=1)
    stages: StageConfig = Field(default_factory=StageConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("input_file", "model", mode="before")
    @classmethod
    def convert_to_path(cls, v):
        """Convert string to Path."""
        if v is None:
            return None
        return Path(v) if isinstance(v, str) else v

    @classmethod
    def from_yaml(cls, path: str | Path) -> "PipelineConfig":
        """Load configuration from a YAML file."""
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        data = self.model_dump(mode="json")
        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False)

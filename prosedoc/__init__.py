"""Configurable natural-language preprocessing pipeline."""

from .config import DEFAULT_CONFIGURATION, Configuration, PipelineConfig
from .document import Document, new_document
from .errors import ConfigurationError, ProseError, StageError
from .model import Model, default_model
from .models import Entity, Sentence, Token
from .options import (
    Option,
    UsingModel,
    UsingSegmenter,
    UsingTokenizer,
    WithExtraction,
    WithSegmentation,
    WithTagging,
    WithTokenization,
    apply_options,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIGURATION",
    "Configuration",
    "PipelineConfig",
    "Document",
    "new_document",
    "ConfigurationError",
    "ProseError",
    "StageError",
    "Model",
    "default_model",
    "Entity",
    "Sentence",
    "Token",
    "Option",
    "UsingModel",
    "UsingSegmenter",
    "UsingTokenizer",
    "WithExtraction",
    "WithSegmentation",
    "WithTagging",
    "WithTokenization",
    "apply_options",
]

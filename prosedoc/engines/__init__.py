"""Pipeline engines."""

from .base import EntityExtracter, Segmenter, Tagger, Tokenizer
from .gazetteer_extracter import GazetteerExtracter
from .iter_tokenizer import IterTokenizer
from .lexicon_tagger import LexiconTagger
from .regex_segmenter import RegexSegmenter

__all__ = [
    "EntityExtracter",
    "Segmenter",
    "Tagger",
    "Tokenizer",
    "GazetteerExtracter",
    "IterTokenizer",
    "LexiconTagger",
    "RegexSegmenter",
]

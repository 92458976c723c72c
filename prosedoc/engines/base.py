"""Base classes and constants for pipeline engines."""

from abc import ABC, abstractmethod

from ..models import Entity, Sentence, Token


# Abbreviations that end with a period but do not end a sentence (lowercase, no dot)
ABBREVIATIONS = {
    "mr", "mrs", "ms", "dr", "prof", "sr", "jr", "st", "mt", "rev", "gen",
    "col", "capt", "lt", "sgt", "gov", "sen", "rep", "hon", "pres",
    "vs", "etc", "al", "approx", "dept", "est", "fig", "inc", "ltd", "co",
    "corp", "no", "vol", "pp", "ed", "eds", "cf", "ca",
    "jan", "feb", "mar", "apr", "jun", "jul", "aug", "sep", "sept", "oct",
    "nov", "dec", "mon", "tue", "wed", "thu", "fri", "sat", "sun",
}

# Titles that introduce a person's name
HONORIFICS = {"mr", "mrs", "ms", "dr", "prof", "sir", "madam", "rev", "gen", "capt", "sen", "gov"}

# Sentence-final punctuation
SENTENCE_TERMINATORS = ".!?"

# Characters that may follow a terminator and still belong to the sentence
CLOSING_PUNCTUATION = "\"')]}”’"

# Characters peeled off the front of a whitespace-delimited chunk
TOKEN_PREFIXES = "\"'([{<$#`“‘£€"

# Characters peeled off the end of a whitespace-delimited chunk
TOKEN_SUFFIXES = ".,;:!?\"')]}>%”’"

# Clitics split off the end of a word
CONTRACTIONS = ("n't", "'s", "'re", "'ve", "'ll", "'d", "'m")

EMOTICONS = {
    ":)", ":-)", ":(", ":-(", ";)", ";-)", ":D", ":-D", ":P", ":-P",
    ":/", ":-/", ":o", ":O", "<3", "^_^", "-_-", ":'(",
}


class Segmenter(ABC):
    """Splits text into sentence spans."""

    @abstractmethod
    def segment(self, text: str) -> list[Sentence]:
        """Segment text into sentences.

        Args:
            text: Input text

        Returns:
            Sentences in document order, with offsets into `text`
        """
        pass


class Tokenizer(ABC):
    """Splits text into token spans."""

    @abstractmethod
    def tokenize(self, text: str) -> list[Token]:
        """Tokenize text.

        Args:
            text: Input text

        Returns:
            Untagged tokens in document order, with offsets into `text`
        """
        pass


class Tagger(ABC):
    """Annotates tokens with part-of-speech tags."""

    @abstractmethod
    def tag(self, tokens: list[Token]) -> list[Token]:
        """Tag tokens in place.

        Args:
            tokens: Tokens produced by a Tokenizer (may be empty)

        Returns:
            The same tokens, in the same order, with `tag` set
        """
        pass


class EntityExtracter(ABC):
    """Finds named entities in tagged tokens."""

    @abstractmethod
    def classify(self, tokens: list[Token]) -> list[Entity]:
        """Label tokens in place with IOB entity labels.

        Args:
            tokens: Tagged tokens

        Returns:
            Entities in document order
        """
        pass


def is_abbreviation(word: str, abbreviations=ABBREVIATIONS) -> bool:
    """Check whether a period-final word is an abbreviation or an initial.

    Args:
        word: Word including its trailing period (e.g. "Dr." or "U.S.")
        abbreviations: Known abbreviations, lowercase and without the period

    Returns:
        True if the period belongs to the word
    """
    if not word.endswith(".") or len(word) < 2:
        return False
    stem = word[:-1]
    if stem.lower() in abbreviations:
        return True
    # Initials and dotted acronyms: "J.", "U.S.", "e.g."
    parts = stem.split(".")
    return all(len(part) == 1 and part.isalpha() for part in parts)

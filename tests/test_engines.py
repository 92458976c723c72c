"""Tests for the default segmentation, tokenization, tagging and extraction engines."""

import pytest

from prosedoc.engines import GazetteerExtracter, IterTokenizer, LexiconTagger, RegexSegmenter
from prosedoc.engines.base import is_abbreviation
from prosedoc.models import Entity, Token


def texts(items):
    return [item.text for item in items]


class TestRegexSegmenter:
    """Tests for the regex sentence segmenter."""

    @pytest.fixture
    def segmenter(self):
        return RegexSegmenter()

    def test_empty(self, segmenter):
        assert segmenter.segment("") == []
        assert segmenter.segment("   \n ") == []

    def test_abbreviations_do_not_split(self, segmenter):
        result = segmenter.segment("Dr. Smith went home. He slept.")

        assert texts(result) == ["Dr. Smith went home.", "He slept."]

    def test_initials_do_not_split(self, segmenter):
        result = segmenter.segment("J. K. Rowling wrote books. She is rich.")

        assert texts(result) == ["J. K. Rowling wrote books.", "She is rich."]

    def test_lowercase_continuation(self, segmenter):
        result = segmenter.segment("He said wait. and then left.")

        assert texts(result) == ["He said wait. and then left."]

    def test_question_and_exclamation(self, segmenter):
        result = segmenter.segment("Really? Yes! Fine.")

        assert texts(result) == ["Really?", "Yes!", "Fine."]

    def test_closing_quote_stays_with_sentence(self, segmenter):
        result = segmenter.segment('He said "Stop." Then he left.')

        assert texts(result) == ['He said "Stop."', "Then he left."]

    def test_text_without_terminator(self, segmenter):
        result = segmenter.segment("no punctuation here")

        assert texts(result) == ["no punctuation here"]
        assert (result[0].start, result[0].end) == (0, 19)

    def test_decimal_numbers(self, segmenter):
        result = segmenter.segment("It costs 3.50 dollars. Cheap.")

        assert texts(result) == ["It costs 3.50 dollars.", "Cheap."]

    def test_offsets(self, segmenter):
        text = "  First one.\n\nSecond one.  "
        result = segmenter.segment(text)

        assert [(s.start, s.end) for s in result] == [(2, 12), (14, 25)]
        assert all(text[s.start:s.end] == s.text for s in result)

    def test_custom_abbreviations(self):
        segmenter = RegexSegmenter(abbreviations={"approx"})

        assert len(segmenter.segment("Approx. Ten people came.")) == 1
        # "Dr" is no longer known
        assert len(segmenter.segment("Ask Dr. Who.")) == 2


class TestIterTokenizer:
    """Tests for the iterative tokenizer."""

    @pytest.fixture
    def tokenizer(self):
        return IterTokenizer()

    def test_empty(self, tokenizer):
        assert tokenizer.tokenize("") == []

    def test_punctuation(self, tokenizer):
        result = tokenizer.tokenize("(Hello), world.")

        assert texts(result) == ["(", "Hello", ")", ",", "world", "."]

    def test_contractions(self, tokenizer):
        assert texts(tokenizer.tokenize("Don't stop!")) == ["Do", "n't", "stop", "!"]
        assert texts(tokenizer.tokenize("John's car")) == ["John", "'s", "car"]
        assert texts(tokenizer.tokenize("We'll see")) == ["We", "'ll", "see"]

    def test_abbreviations_kept(self, tokenizer):
        result = tokenizer.tokenize("Dr. Smith lives in the U.S. now, e.g. here.")

        assert texts(result) == [
            "Dr.", "Smith", "lives", "in", "the", "U.S.", "now", ",", "e.g.", "here", ".",
        ]

    def test_ellipsis(self, tokenizer):
        assert texts(tokenizer.tokenize("Wait... what")) == ["Wait", "...", "what"]
        assert texts(tokenizer.tokenize("...")) == ["..."]

    def test_urls_emails_and_emoticons(self, tokenizer):
        result = tokenizer.tokenize("See https://example.com/a, mail a.b@example.com. :)")

        assert texts(result) == [
            "See", "https://example.com/a", ",", "mail", "a.b@example.com", ".", ":)",
        ]

    def test_numbers(self, tokenizer):
        assert texts(tokenizer.tokenize("It costs $3.50 (10%).")) == [
            "It", "costs", "$", "3.50", "(", "10", "%", ")", ".",
        ]

    def test_offsets(self, tokenizer):
        text = ' "Quoted," she said.'
        result = tokenizer.tokenize(text)

        assert texts(result) == ['"', "Quoted", ",", '"', "she", "said", "."]
        assert all(text[t.start:t.end] == t.text for t in result)
        assert all(t.tag is None and t.label is None for t in result)


def test_is_abbreviation():
    assert is_abbreviation("Dr.")
    assert is_abbreviation("U.S.")
    assert is_abbreviation("e.g.")
    assert not is_abbreviation("home.")
    assert not is_abbreviation("Dr")
    assert not is_abbreviation(".")


class TestLexiconTagger:
    """Tests for the lexicon tagger."""

    @pytest.fixture
    def tagger(self):
        return LexiconTagger()

    def tag(self, tagger, words):
        tokens = [Token(text=word, start=0, end=len(word)) for word in words]
        return [token.tag for token in tagger.tag(tokens)]

    def test_empty(self, tagger):
        assert tagger.tag([]) == []

    def test_empty_token_text(self, tagger):
        tokens = tagger.tag([Token("", 0, 0)])

        assert tokens[0].tag == "NN"

    def test_tags_in_place(self, tagger):
        tokens = [Token("He", 0, 2), Token("slept", 3, 8)]
        result = tagger.tag(tokens)

        assert result is tokens
        assert [token.tag for token in tokens] == ["PRP", "VBD"]

    def test_simple_sentence(self, tagger):
        assert self.tag(tagger, ["The", "dog", "runs", "."]) == ["DT", "NN", "VBZ", "."]

    def test_suffix_rules(self, tagger):
        assert self.tag(tagger, ["She", "quickly", "walked", "home"]) == [
            "PRP", "RB", "VBD", "NN",
        ]

    def test_proper_nouns_and_numbers(self, tagger):
        assert self.tag(tagger, ["I", "met", "Alice", "in", "1999", "."]) == [
            "PRP", "VBD", "NNP", "IN", "CD", ".",
        ]

    def test_sentence_initial_capital_is_not_proper_noun(self, tagger):
        assert self.tag(tagger, ["Running", "is", "fun", "."])[0] == "VBG"

    def test_custom_lexicon(self):
        tagger = LexiconTagger({"Dog": "XX"})

        assert self.tag(tagger, ["the", "dog"]) == ["DT", "XX"]

    def test_lexicon_is_read_only(self, tagger):
        with pytest.raises(TypeError):
            tagger.lexicon["new"] = "NN"


class TestGazetteerExtracter:
    """Tests for the gazetteer entity extracter."""

    def tokens(self, pairs):
        result = []
        offset = 0
        for text, tag in pairs:
            result.append(Token(text=text, start=offset, end=offset + len(text), tag=tag))
            offset += len(text) + 1
        return result

    def test_labels(self):
        tokens = self.tokens([
            ("Mr.", "NNP"), ("Brown", "NNP"), ("visited", "VBD"), ("New", "NNP"),
            ("York", "NNP"), ("with", "IN"), ("Acme", "NNP"), ("Inc.", "NNP"),
            ("and", "CC"), ("Zork", "NNP"),
        ])
        entities = GazetteerExtracter().classify(tokens)

        assert [(e.text, e.label) for e in entities] == [
            ("Brown", "PERSON"),
            ("New York", "GPE"),
            ("Acme Inc.", "ORG"),
            ("Zork", "MISC"),
        ]
        assert [t.label for t in tokens] == [
            "O", "B-PERSON", "O", "B-GPE", "I-GPE", "O", "B-ORG", "I-ORG", "O", "B-MISC",
        ]

    def test_spans(self):
        tokens = self.tokens([("in", "IN"), ("Paris", "NNP")])

        assert GazetteerExtracter().classify(tokens) == [
            Entity(text="Paris", label="GPE", start=3, end=8)
        ]

    def test_custom_gazetteer(self):
        tokens = self.tokens([("Zork", "NNP")])

        entities = GazetteerExtracter({"Zork": "ORG"}).classify(tokens)

        assert entities[0].label == "ORG"

    def test_untagged_tokens(self):
        tokens = [Token("London", 0, 6)]

        assert GazetteerExtracter().classify(tokens) == []
        assert tokens[0].label == "O"

    def test_lone_honorific(self):
        tokens = self.tokens([("Dr.", "NNP"), ("left", "VBD")])

        assert GazetteerExtracter().classify(tokens) == []

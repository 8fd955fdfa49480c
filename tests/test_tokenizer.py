import pytest

from embnorm import RegexTokenizer, SentencePieceTokenizer


class StubProcessor:
    def __init__(self):
        self.calls = []

    def encode(self, text, out_type=None):
        self.calls.append((text, out_type))
        return ["▁" + piece for piece in text.split()]


def test_regex_tokenizer_splits_words_and_punctuation():
    tokenizer = RegexTokenizer()
    assert tokenizer.tokenize("Got enuf data, here goes!") == ["Got", "enuf", "data", ",", "here", "goes", "!"]


def test_regex_tokenizer_keeps_case_by_default():
    assert RegexTokenizer().tokenize("WoooHooo") == ["WoooHooo"]


def test_regex_tokenizer_lowercase():
    assert RegexTokenizer(lowercase=True).tokenize("Royal Enfield") == ["royal", "enfield"]
    assert RegexTokenizer(config_dict={"LOWERCASE": True}).tokenize("Royal") == ["royal"]


def test_regex_tokenizer_custom_pattern():
    tokenizer = RegexTokenizer(pattern=r"[@#]?\w+")
    assert tokenizer.tokenize("cc: @KellenDB #nmt") == ["cc", "@KellenDB", "#nmt"]


def test_regex_tokenizer_empty_text():
    assert RegexTokenizer().tokenize("") == []
    assert RegexTokenizer().tokenize(" \t\n") == []


def test_sentencepiece_tokenizer_requires_model():
    with pytest.raises(RuntimeError, match="not loaded"):
        SentencePieceTokenizer().tokenize("text")


def test_sentencepiece_tokenizer_encodes_pieces():
    processor = StubProcessor()
    tokenizer = SentencePieceTokenizer(processor=processor)
    assert tokenizer.tokenize("Fun overtaking") == ["▁Fun", "▁overtaking"]
    assert processor.calls == [("Fun overtaking", str)]


def test_sentencepiece_tokenizer_lowercase():
    processor = StubProcessor()
    tokenizer = SentencePieceTokenizer(processor=processor, lowercase=True)
    tokenizer.tokenize("Fun")
    assert processor.calls == [("fun", str)]

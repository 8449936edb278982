import pytest

from tfidf_ranking.tokenizer import TokenSequence, WordTokenizer, tokenize


@pytest.mark.parametrize(
    "text, expected",
    [
        ("The Cat sat. cat-nap!", ["the", "cat", "sat", "cat", "nap"]),
        ("Café, CAFÉ! café123", ["café", "café", "café"]),
        ("abc123def", ["abc", "def"]),
        ("snake_case words", ["snake", "case", "words"]),
        ("  \t\n", []),
        ("", []),
        ("42 3.14 ---", []),
        ("Ovo je ČLANAK o šumi", ["ovo", "je", "članak", "o", "šumi"]),
        ("x² ½ Ⅷ", ["x"]),
        ("area m² or ¾ cup", ["area", "m", "or", "cup"]),
        ("abc²def", ["abc", "def"]),
        ("Ⅻchapter", ["chapter"]),
    ],
)
def test_tokenize(text, expected):
    assert list(tokenize(text)) == expected


def test_token_sequence_is_lazy_and_restartable():
    tokens = tokenize("one two three")
    assert isinstance(tokens, TokenSequence)
    first = iter(tokens)
    assert next(first) == "one"
    # A fresh iteration starts from the beginning again
    assert list(tokens) == ["one", "two", "three"]
    assert list(tokens) == ["one", "two", "three"]
    assert list(first) == ["two", "three"]


def test_word_tokenizer_callable():
    tokenizer = WordTokenizer()
    assert tokenizer("Hello, World") == ["hello", "world"]


@pytest.mark.parametrize("text", ["area m² or ¾ cup", "Ⅷ Henry², ½-time x³y", "naïve Straße 42nd"])
def test_tokens_contain_only_letters(text):
    for token in tokenize(text):
        assert token.isalpha(), token

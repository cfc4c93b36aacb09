import pytest

from syllable_emphasis.models import Token, TokenKind
from syllable_emphasis.tokenization import join_tokens, split_word, tokenize_syllables


@pytest.mark.parametrize(
    "text",
    [
        "",
        "Bonjour le monde.",
        "Strengths, rhythms and 2024 twelfths!",
        "Été, déjà vu…\n\n\tnaïve café?!",
        "snake_case   words\r\nend",
    ],
)
def test_tokens_concatenate_back_to_input(text: str):
    assert join_tokens(tokenize_syllables(text)) == text


def test_tokenize_bonjour_le_monde():
    tokens = tokenize_syllables("Bonjour le monde.")

    assert tokens == [
        Token(TokenKind.SYLLABLE, "Bonj"),
        Token(TokenKind.SYLLABLE, "our"),
        Token(TokenKind.SEPARATOR, " "),
        Token(TokenKind.SYLLABLE, "le"),
        Token(TokenKind.SEPARATOR, " "),
        Token(TokenKind.SYLLABLE, "mond"),
        Token(TokenKind.SYLLABLE, "e"),
        Token(TokenKind.SEPARATOR, "."),
    ]


def test_punctuation_is_one_separator_per_character():
    tokens = tokenize_syllables("?!  \n")

    assert [token.text for token in tokens] == ["?", "!", "  \n"]
    assert all(token.kind is TokenKind.SEPARATOR for token in tokens)


def test_split_word_keeps_trailing_consonants():
    assert split_word("banana") == ["ban", "an", "a"]
    assert split_word("world") == ["world"]
    assert split_word("strengths") == ["strengths"]


def test_vowel_less_runs_stay_whole():
    assert split_word("2024") == ["2024"]
    assert split_word("rhythm") == ["rhythm"]
    assert split_word("Psst") == ["Psst"]


def test_unicode_words_are_not_broken_into_separators():
    tokens = tokenize_syllables("café")

    assert tokens == [Token(TokenKind.SYLLABLE, "café")]

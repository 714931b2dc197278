from iindex.text_processing.tokenization.tokenizers import (
    tokenizer_func,
    get_word_counts,
)

def test_tokenizer_func():
    assert tokenizer_func("Hello, World!") == ["hello", "world"]
    assert tokenizer_func("123 abc!") == ["123", "abc"]
    assert tokenizer_func("") == []
    assert tokenizer_func("Symbols! @# aren't words.") == ["symbols", "aren", "t", "words"]

def test_tokenizer_keeps_mixed_alphanumeric_tokens():
    assert tokenizer_func("foo123 bar 42") == ["foo123", "bar", "42"]

def test_tokenizer_punctuation_only():
    assert tokenizer_func("!!! ... ,,, ???") == []
    assert tokenizer_func("   \t\n  ") == []

def test_tokenizer_punctuation_splits_words():
    assert tokenizer_func("e-mail foo.bar,baz") == ["e", "mail", "foo", "bar", "baz"]

def test_tokenizer_underscore_is_separator():
    assert tokenizer_func("snake_case") == ["snake", "case"]

def test_tokenizer_preserves_order_and_duplicates():
    assert tokenizer_func("b a b") == ["b", "a", "b"]

def test_tokenizer_is_repeatable():
    text = "The Quick, brown FOX!"
    assert tokenizer_func(text) == tokenizer_func(text)

def test_tokenizer_non_ascii():
    assert tokenizer_func("Café ÜBER naïve") == ["café", "über", "naïve"]
    assert tokenizer_func("Привет, мир!") == ["привет", "мир"]
    assert tokenizer_func("10€ price") == ["10", "price"]

def test_tokens_are_lowercase_alphanumeric():
    text = "MiXeD CaSe, with-Punctuation; and DIGITS 123! Ünïcödé?"
    for token in tokenizer_func(text):
        assert token.isalnum()
        assert token == token.lower()

def test_get_word_counts():
    words = ["apple", "banana", "apple"]
    result = get_word_counts(words)
    assert result["apple"] == 2
    assert result["banana"] == 1

def test_tokenizer_keeps_combining_vowel_signs():
    assert tokenizer_func("हिंदी भाषा") == ["हिंदी", "भाषा"]
    assert tokenizer_func("বাংলা ভাষা") == ["বাংলা", "ভাষা"]
    assert tokenizer_func("Hindi: हिंदी!") == ["hindi", "हिंदी"]

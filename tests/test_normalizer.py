from wordforms.normalizer import is_valid_word, match_case, normalize_word


def test_normalize_word():
    assert normalize_word(" Parties ") == "parties"
    assert normalize_word(123) == ""  # type: ignore[arg-type]


def test_is_valid_word():
    assert is_valid_word("cat")
    assert is_valid_word("Mp3")
    assert not is_valid_word("")
    assert not is_valid_word("foo bar")
    assert not is_valid_word("foo-bar")
    assert not is_valid_word("über")
    assert not is_valid_word(None)


def test_match_case():
    assert match_case("cat", "cats") == "cats"
    assert match_case("Cat", "cats") == "Cats"
    assert match_case("CAT", "cats") == "CATS"
    assert match_case("A", "as") == "As"

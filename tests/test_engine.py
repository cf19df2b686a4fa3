import itertools

import pytest
from packages.engine import (
    LetterMatch, Word, WordTooShort, absent_all, correct_all, present_all, score, to_pattern,
)

C, P, A = LetterMatch.CORRECT, LetterMatch.PRESENT, LetterMatch.ABSENT


def w(s):
    return Word.from_text(s)


# --- golden evaluations (hidden, guess) ---
@pytest.mark.parametrize("hidden,guess,expected", [
    ("fuzzy", "hello", (A, A, A, A, A)),
    ("fuzzy", "testy", (A, A, A, A, C)),
    ("fuzzy", "u00u0", (P, A, A, A, A)),
    ("fuzzy", "fuzzy", (C, C, C, C, C)),
    ("fuzzy", "zzzzz", (A, A, C, C, A)),
    ("level", "belle", (A, C, P, P, P)),
    ("level", "lemon", (C, C, A, A, A)),
    ("scoop", "cools", (P, P, C, A, P)),
    ("crane", "raise", (P, P, A, A, C)),
    ("abbey", "babes", (P, P, C, C, A)),
    ("abbey", "kebab", (A, P, C, P, P)),
])
def test_evaluate_golden(hidden, guess, expected):
    assert w(hidden).evaluate(w(guess)) == expected


def test_score_pattern_matches_evaluate():
    assert score("belle", "level") == "-GYYY"
    assert score("testy", "fuzzy") == "----G"
    assert score("u00u0", "fuzzy") == "Y----"
    assert to_pattern(correct_all()) == "GGGGG"


def test_green_is_not_starved_by_earlier_yellow():
    # The exact 'e' at index 4 claims its count before any yellow is handed out
    assert w("crepe").evaluate(w("eerie")) == (P, A, P, A, C)


def test_duplicate_letter_bound_exhaustive_small_alphabet():
    # Every word over {a, b} against every other: no letter is over-reported
    words = ["".join(p) for p in itertools.product("ab", repeat=5)]
    for hidden, guess in itertools.product(words, repeat=2):
        matches = w(hidden).evaluate(w(guess))
        for ch in "ab":
            hits = sum(1 for g, m in zip(guess, matches) if g == ch and not m.is_absent())
            assert hits <= hidden.count(ch)
        for i, (h, g) in enumerate(zip(hidden, guess)):
            if h == g:
                assert matches[i] is C


def test_self_match_and_no_overlap():
    for s in ["fuzzy", "AAAAA", "a1b2c", "     "]:
        assert w(s).evaluate(w(s)) == correct_all()
    assert w("abcde").evaluate(w("fghij")) == absent_all()
    assert w("abcde").evaluate(w("eabcd")) == present_all()


def test_identity_hash_values():
    assert w("AAAAA").identity_hash() == 0x4141414141
    assert w("aaaaa").identity_hash() == 0x6161616161
    assert w("fuzzy").identity_hash() == w("fuzzy").identity_hash()


def test_identity_hash_uses_every_position():
    assert w("fuzzy").identity_hash() != w("fuzzz").identity_hash()
    assert w("hello").identity_hash() != w("olleh").identity_hash()


def test_from_text_boundaries():
    with pytest.raises(WordTooShort) as exc:
        Word.from_text("abcd")
    assert exc.value.length == 4
    with pytest.raises(WordTooShort):
        Word.from_text("")
    assert str(w("fuzzyness")) == "fuzzy"
    assert w("fuzzyness") == w("fuzzy")


def test_case_is_preserved():
    assert w("Fuzzy") != w("fuzzy")
    assert w("fuzzy").evaluate(w("FUZZY")) == absent_all()


def test_from_letters():
    assert Word.from_letters("hello") == w("hello")
    with pytest.raises(ValueError):
        Word.from_letters("hi")


def test_contains():
    word = w("fuzzy")
    assert word.contains("z") and not word.contains("a")
    assert word.contains_at("y", 4) and not word.contains_at("y", 0)


def test_format_paints_by_status():
    word = w("testy")
    out = word.format(w("fuzzy").evaluate(word))
    assert out.startswith("test")
    assert "\x1b[32my" in out
    assert LetterMatch.PRESENT.format_char("u").startswith("\x1b[33m")
    assert LetterMatch.ABSENT.format_char("q") == "q"
    assert LetterMatch.CORRECT.hint == "G"


def test_constructor_enforces_five_characters():
    with pytest.raises(ValueError):
        Word(("a", "b"))
    with pytest.raises(ValueError):
        Word(("ab", "c", "d", "e", "f"))
    assert Word("hello") == w("hello")
    assert Word(list("hello")).identity_hash() == w("hello").identity_hash()

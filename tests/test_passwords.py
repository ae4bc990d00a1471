import pytest

from skybooking.passwords import (
    HASH_MODULUS,
    MAX_STRENGTH,
    password_hash,
    password_strength,
    strength_label,
)


def test_empty_password_hashes_to_zero():
    assert password_hash("") == 0


def test_hash_is_deterministic_and_in_range():
    value = password_hash("password")
    assert value == password_hash("password")
    assert 0 <= value < HASH_MODULUS


def test_hash_depends_on_order():
    assert password_hash("ab") != password_hash("ba")


def test_trailing_nul_characters_add_nothing():
    assert password_hash("secret" + "\x00" * 10) == password_hash("secret")


def test_weights_cycle_every_sixty_characters():
    base = "x" * 60
    combined = password_hash(base + "y")
    assert combined == (password_hash(base) + password_hash("y")) % HASH_MODULUS


@pytest.mark.parametrize("text", ["", "a", "Ab1!", "Abcdef1"])
def test_short_passwords_score_zero(text):
    assert password_strength(text) == 0


def test_best_password_reaches_maximum():
    assert password_strength("Tr0ub4dor&Xq") == MAX_STRENGTH


def test_sequence_is_penalised():
    assert password_strength("abcdefgh") < password_strength("acegikmo")


def test_repetition_is_penalised():
    assert password_strength("zzzmqwtp") < password_strength("zmzmqwtp")


def test_length_bonus():
    assert password_strength("Aa1!Aa1!") < password_strength("Aa1!Aa1!Aa1!")


@pytest.mark.parametrize("text", ["password", "Password1!", "aaaaaaaaaaaa", "ÄÖÜäöüß12345"])
def test_strength_within_scale(text):
    assert 0 <= password_strength(text) <= MAX_STRENGTH


@pytest.mark.parametrize(
    "score, label",
    [
        (0, "very weak"),
        (2, "very weak"),
        (3, "weak"),
        (4, "weak"),
        (5, "strong"),
        (6, "strong"),
        (7, "very strong"),
        (8, "very strong"),
    ],
)
def test_strength_labels(score, label):
    assert strength_label(score) == label


@pytest.mark.parametrize("score", [-1, 9])
def test_strength_label_out_of_range(score):
    with pytest.raises(ValueError):
        strength_label(score)
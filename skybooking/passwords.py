"""Password hashing and strength scoring."""

PRIMES = (
    2, 3, 5, 7, 11, 13, 17,
    19, 23, 29, 31, 37, 41,
    43, 47, 53, 59, 61, 67,
    71, 73, 79, 83, 89, 97,
    101, 103, 107, 109, 113,
    127, 131, 137, 139, 149,
    151, 157, 163, 167, 173,
    179, 181, 191, 193, 197,
    199, 211, 223, 227, 229,
    233, 239, 241, 251, 257,
    263, 269, 271, 277, 281,
)

HASH_MODULUS = 10**9 + 21
MAX_STRENGTH = 8


def _signed_bytes(password):
    """UTF-8 bytes of the password as signed char values."""
    return [b - 256 if b > 127 else b for b in password.encode("utf-8")]


def _truncated_mod(value, modulus):
    """Remainder whose sign follows the dividend."""
    remainder = abs(value) % modulus
    return -remainder if value < 0 else remainder


def password_hash(password):
    """Hash a password by weighting each character with a cycling prime."""
    result = 0
    for i, char in enumerate(_signed_bytes(password)):
        weight = PRIMES[len(PRIMES) - 1 - i % len(PRIMES)]
        result = _truncated_mod(result + char * weight, HASH_MODULUS)
    return result


def _is_upper(c):
    return 65 <= c <= 90


def _is_lower(c):
    return 97 <= c <= 122


def _is_digit(c):
    return 48 <= c <= 57


def password_strength(password):
    """Score a password from 0 (very weak) to 8 (very strong)."""
    chars = _signed_bytes(password)
    if len(chars) < 8:
        return 0

    long_enough = len(chars) >= 12
    strength = 2 if long_enough else 1

    sequence = seq_penalised = False
    repetition = rep_penalised = False
    upper = lower = number = special = False

    previous = None
    for c in chars:
        if not upper and _is_upper(c):
            strength += 1
            upper = True
        if not lower and _is_lower(c):
            strength += 1
            lower = True
        if not number and _is_digit(c):
            strength += 1
            number = True
        if not special and not (_is_upper(c) or _is_lower(c) or _is_digit(c)):
            strength += 1
            special = True

        if previous is not None and not seq_penalised and c in (previous + 1, previous - 1):
            if sequence:
                strength -= 1
                seq_penalised = True
            else:
                sequence = True
        else:
            sequence = False

        if previous is not None and not rep_penalised and c == previous:
            if repetition:
                strength -= 1
                rep_penalised = True
            else:
                repetition = True
        else:
            repetition = False

        previous = c

    if special and number and upper and lower:
        strength += 2 if long_enough else 1

    return max(strength, 0)


def strength_label(score):
    """Describe a strength score in words."""
    if not 0 <= score <= MAX_STRENGTH:
        raise ValueError(f"strength score out of range: {score}")
    if score <= 2:
        return "very weak"
    if score <= 4:
        return "weak"
    if score <= 6:
        return "strong"
    return "very strong"
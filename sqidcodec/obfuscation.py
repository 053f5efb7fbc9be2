"""
Deterministic alphabet permutation used to scramble identifiers.

The same alphabet always shuffles to the same result, which is what lets the
decoder rebuild every alphabet the encoder walked through without any shared
state. It is not cryptographically secure; it only makes identifiers look
random and non-sequential.
"""


def shuffle(alphabet: str) -> str:
    """Returns a permutation of the alphabet derived only from its characters."""
    chars = list(alphabet)
    length = len(chars)

    i, j = 0, length - 1
    while j > 0:
        r = (i * j + ord(chars[i]) + ord(chars[j])) % length
        chars[i], chars[r] = chars[r], chars[i]
        i += 1
        j -= 1

    return "".join(chars)

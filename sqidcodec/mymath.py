"""
Positional base conversion against an arbitrary alphabet.
"""

def to_id(num: int, alphabet: str) -> str:
    """
    Converts a non-negative integer into digits of base len(alphabet),
    most significant first. Zero still produces one digit.
    """
    if num < 0:
        raise ValueError("Input must be a non-negative integer")
    base = len(alphabet)
    result = []
    while True:
        num, remainder = divmod(num, base)
        result.append(alphabet[remainder])
        if num == 0:
            break
    return "".join(reversed(result))


def to_number(s: str, alphabet: str) -> int:
    """
    Converts a digit string back to an integer. Every character must be
    present in the alphabet.
    """
    base = len(alphabet)
    n = 0
    for char in s:
        n = n * base + alphabet.index(char)
    return n

"""Small string helpers used for score display and number parsing."""

_DIGITS = "0123456789"
_SKIPPED_PREFIX = "+- /*%("


def format_number(nb: int) -> str:
    """Render a score; zero and negative values are shown as " 0"."""
    if nb <= 0:
        return " 0"
    return str(nb)


def atoi(text: str) -> int:
    """Accumulate every character as a decimal digit, without validation."""
    result = 0
    for char in text:
        result = result * 10 + (ord(char) - ord("0"))
    return result


def getnbr(text: str) -> int:
    """Read the first run of digits after leading sign and operator characters."""
    rest = text.lstrip(_SKIPPED_PREFIX)
    result = 0
    for char in rest:
        if char not in _DIGITS:
            break
        result = result * 10 + int(char)
    return result


def prefix_equal(first: str, second: str, n: int) -> bool:
    """True when both strings hold at least ``n`` characters and share them."""
    if len(first) < n or len(second) < n:
        return False
    return first[:n] == second[:n]
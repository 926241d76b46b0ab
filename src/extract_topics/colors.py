"""Deterministic display colors for topics."""


def hash_hue(token: str) -> int:
    """Map a token to a hue in [0, 360) using a 32-bit rolling hash."""
    h = 0
    for char in token:
        h = (h * 31 + ord(char)) & 0xFFFFFFFF
    return h % 360


def topic_color(token: str) -> str:
    return f"hsl({hash_hue(token)}deg 65% 50%)"

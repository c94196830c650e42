"""Pad key layout."""

# QWERTY row-first order; the n-th loaded sample goes to the n-th key
PAD_KEYS: tuple[str, ...] = tuple("qwertyuiopasdfghjkl;zxcvbnm,./")


def pad_index(key: str) -> int | None:
    """Position of key in the pad layout, or None if it is not a pad key."""
    try:
        return PAD_KEYS.index(key)
    except ValueError:
        return None

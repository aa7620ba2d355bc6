"""Key names understood by the keyboard backends."""

_KEY_NAMES = {
    "enter": "enter",
    "return": "enter",
    "tab": "tab",
    "space": "space",
    "escape": "escape",
    "esc": "escape",
    "backspace": "backspace",
    "delete": "delete",
    "del": "delete",
    "up": "up",
    "down": "down",
    "left": "left",
    "right": "right",
}

CONFIRM = "enter"
NAVIGATE = "tab"


def normalize_key(key: str) -> str:
    """Map a key name or alias to its canonical name.

    Raises:
        ValueError: If the key is not in the supported set.
    """
    name = key.strip().lower()
    if name not in _KEY_NAMES:
        raise ValueError(f"Unsupported key: {key}")
    return _KEY_NAMES[name]


def supported_keys():
    """Get the sorted list of canonical key names."""
    return sorted(set(_KEY_NAMES.values()))

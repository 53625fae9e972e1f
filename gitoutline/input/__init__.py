"""Input-layer public API: terminal key decoding and key dispatch."""

from .key_registry import KeyComboBinding, KeyComboRegistry
from .keys import key_label, normalize_key, parse_keys
from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key

__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "key_label",
    "normalize_key",
    "parse_keys",
    "read_key",
]

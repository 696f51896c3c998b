"""Input-layer public API for key decoding and focus-aware dispatch."""

from .key_registry import KeyComboBinding, KeyComboRegistry
from .key_router import KeyRouter, handle_key
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "KeyRouter",
    "handle_key",
]

from .dictionary import Dictionary
from .validator import validate_vocabulary, pretty_summary
from .io import read_text, read_hashes, write_hashes

__all__ = [
    "Dictionary", "validate_vocabulary", "pretty_summary",
    "read_text", "read_hashes", "write_hashes",
]

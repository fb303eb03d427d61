from .validator import validate_word_list, pretty_summary
from .io import WordList, load_word_list, normalize_words, read_lines, write_lines
from .loader import BackgroundLoad

__all__ = [
    "validate_word_list", "pretty_summary",
    "WordList", "load_word_list", "normalize_words", "read_lines", "write_lines",
    "BackgroundLoad",
]

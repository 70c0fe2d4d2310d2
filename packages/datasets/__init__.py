from .wordlist import load_words, clean_words, FALLBACK_WORDS, WordCollection
from .validator import inspect_wordlist, pretty_summary
from .io import read_lines, write_lines

__all__ = ["load_words", "clean_words", "FALLBACK_WORDS", "WordCollection",
           "inspect_wordlist", "pretty_summary", "read_lines", "write_lines"]

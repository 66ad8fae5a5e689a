"""plainwiki - a minimal personal wiki backed by plain text files."""

__version__ = "0.1.0"

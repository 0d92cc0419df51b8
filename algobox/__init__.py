"""Classic algorithms, number and text utilities, converters and small console games."""

__version__ = "0.1.0"

__all__ = [
    "backtracking",
    "clock",
    "converters",
    "cricket",
    "dynamic",
    "graphs",
    "huffman",
    "kabaddi",
    "matrix",
    "numbers",
    "playlist",
    "recipes",
    "searching",
    "sorting",
    "text",
    "trees",
]
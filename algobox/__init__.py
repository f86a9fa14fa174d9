"""Classic algorithms on linked lists, arrays, matrices, integers, text, stacks and trees."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "integers",
    "linked",
    "matrix",
    "random_list",
    "searching",
    "stacks",
    "text",
    "trees",
]
"""Classic algorithm exercises on arrays, strings, numbers, linked lists and binary trees."""

__version__ = "0.1.0"
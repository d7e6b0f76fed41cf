"""Classic algorithms over lists, strings, integers and graphs."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "sums",
    "sliding_window",
    "greedy",
    "strings",
    "numbers",
    "recursion",
    "disjoint_set",
    "graphs",
]
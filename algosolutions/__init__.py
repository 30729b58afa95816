"""Solutions to classic algorithm problems: sums, permutations, dynamic programming, trees, arrays, number theory and strings."""

__version__ = "0.1.0"

__all__ = ["arrays", "dynamic", "numtheory", "permutations", "sums", "text", "trees"]
"""String routines over binary strings and vowel/consonant counts."""

from collections import Counter
from collections.abc import Sequence

_VOWELS = frozenset("aeiou")


def find_different_binary_string(nums: Sequence[str]) -> str:
    """Return a binary string of length ``len(nums)`` that is not in ``nums``.

    The ``i``-th character is the flip of the ``i``-th character of ``nums[i]``.
    """
    return "".join("1" if s[i] == "0" else "0" for i, s in enumerate(nums))


def is_vowel(c: str) -> bool:
    """Tell whether ``c`` is one of the lowercase vowels a, e, i, o, u."""
    return c in _VOWELS


def _at_least(word: str, k: int) -> int:
    """Count substrings holding every vowel and at least ``k`` consonants."""
    vowels: Counter[str] = Counter()
    consonants = 0
    start = 0
    total = 0
    size = len(word)
    for end, letter in enumerate(word):
        if is_vowel(letter):
            vowels[letter] += 1
        else:
            consonants += 1
        while len(vowels) == len(_VOWELS) and consonants >= k:
            total += size - end
            first = word[start]
            if is_vowel(first):
                vowels[first] -= 1
                if not vowels[first]:
                    del vowels[first]
            else:
                consonants -= 1
            start += 1
    return total


def count_of_substrings(word: str, k: int) -> int:
    """Count substrings holding every vowel and exactly ``k`` consonants."""
    return _at_least(word, k) - _at_least(word, k + 1)
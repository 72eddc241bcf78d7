"""String problems: column names, search, windows, numerals and filters."""

from string import ascii_uppercase

_ROMAN = (
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
    (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
)


def excel_column(n):
    """Return the spreadsheet column title for column ``n`` (1 is "A").

    Non-positive numbers give an empty string.
    """
    letters = []
    while n > 0:
        n, rem = divmod(n - 1, 26)
        letters.append(ascii_uppercase[rem])
    return "".join(reversed(letters))


def _prefix_table(pattern):
    table = [0] * len(pattern)
    length = 0
    for index in range(1, len(pattern)):
        while length and pattern[index] != pattern[length]:
            length = table[length - 1]
        if pattern[index] == pattern[length]:
            length += 1
        table[index] = length
    return table


def find_substring(text, pattern):
    """Return the index of the first occurrence of ``pattern`` in ``text``, or -1.

    Uses Knuth-Morris-Pratt matching. An empty pattern is found at 0.
    """
    if not pattern:
        return 0
    table = _prefix_table(pattern)
    matched = 0
    for index, char in enumerate(text):
        while matched and char != pattern[matched]:
            matched = table[matched - 1]
        if char == pattern[matched]:
            matched += 1
            if matched == len(pattern):
                return index - matched + 1
    return -1


def longest_unique_substring(text):
    """Return the length of the longest substring without repeated characters."""
    last_seen = {}
    start = -1
    best = 0
    for index, char in enumerate(text):
        start = max(start, last_seen.get(char, -1))
        last_seen[char] = index
        best = max(best, index - start)
    return best


def to_roman(n):
    """Return the Roman numeral for ``n``; non-positive numbers give ""."""
    parts = []
    for value, symbol in _ROMAN:
        if n <= 0:
            break
        times, n = divmod(n, value)
        parts.append(symbol * times)
    return "".join(parts)


def is_alnum_palindrome(text):
    """Tell whether the ASCII letters and digits of ``text`` read the same both ways.

    Letter case is ignored.
    """
    kept = [char.lower() for char in text if char.isascii() and char.isalnum()]
    return kept == kept[::-1]


def drop_repeated_letters(text):
    """Keep a character only when its letter is not currently marked as seen.

    Case is ignored. Each occurrence toggles the mark: a first occurrence is
    kept, a second removes the mark and is dropped, a third is kept again.
    """
    seen = set()
    kept = []
    for char in text:
        key = char.lower()
        if key in seen:
            seen.discard(key)
        else:
            seen.add(key)
            kept.append(char)
    return "".join(kept)


def is_rotation(first, second):
    """Tell whether ``second`` is a rotation of ``first``."""
    return len(first) == len(second) and second in first + first
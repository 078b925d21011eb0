"""String comparison, palindromes, reversal and longest common subsequence."""

from __future__ import annotations


def compare_strings(first: str, second: str) -> list[str]:
    """Describe how two strings relate, one sentence per observation.

    The first sentence, present only for differing strings, states that they
    are not equal. The last names the greater string; for equal strings the
    second string is named.
    """
    statements = []
    if first != second:
        statements.append(f"{first} is not equal to {second}")
    if first > second:
        statements.append(f"{first} is greater than {second}")
    else:
        statements.append(f"{second} is greater than {first}")
    return statements


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same forwards and backwards."""
    half = len(text) // 2
    return all(a == b for a, b in zip(text[:half], reversed(text)))


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def longest_common_subsequence(first: str, second: str) -> str:
    """Return a longest common subsequence of two strings.

    The table is built bottom-up and walked back from the end; when both
    neighbours tie, the walk steps along ``second``.
    """
    rows, cols = len(first), len(second)
    table = [[0] * (cols + 1) for _ in range(rows + 1)]
    for i, a in enumerate(first, start=1):
        for j, b in enumerate(second, start=1):
            if a == b:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])

    picked: list[str] = []
    i, j = rows, cols
    while i > 0 and j > 0:
        if first[i - 1] == second[j - 1]:
            picked.append(first[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(picked))
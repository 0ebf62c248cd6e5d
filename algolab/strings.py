"""String routines: decoding, sliding windows and anagram grouping."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def decode_string(s: str) -> str:
    """Expand ``k[text]`` groups, nested or not, e.g. ``2[ab]`` becomes ``abab``."""
    stack: list[tuple[str, int]] = []
    result = ""
    count = 0
    for ch in s:
        if ch == "[":
            stack.append((result, count))
            result, count = "", 0
        elif ch == "]":
            if not stack:
                raise ValueError("unbalanced ']' in encoded string")
            before, repeat = stack.pop()
            result = before + result * repeat
        elif "0" <= ch <= "9":
            count = count * 10 + int(ch)
        else:
            result += ch
    if stack:
        raise ValueError("unbalanced '[' in encoded string")
    return result


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    left = 0
    best = 0
    for right, ch in enumerate(s):
        if last_seen.get(ch, -1) >= left:
            left = last_seen[ch] + 1
        last_seen[ch] = right
        best = max(best, right - left + 1)
    return best


def find_anagrams(s: str, p: str) -> list[int]:
    """Start indices of every substring of ``s`` that is an anagram of ``p``."""
    size = len(p)
    if not size or size > len(s):
        return []
    need = Counter(p)
    window = Counter(s[: size - 1])
    result: list[int] = []
    for left, incoming in enumerate(s[size - 1 :]):
        window[incoming] += 1
        if window == need:
            result.append(left)
        window[s[left]] -= 1
    return result


def group_anagrams(strs: Iterable[str]) -> list[list[str]]:
    """Group words that are anagrams of each other, in first-seen order."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def min_window(s: str, t: str) -> str:
    """Shortest substring of ``s`` holding every character of ``t``, or ``""``."""
    if not t:
        return ""
    need = Counter(t)
    window: Counter[str] = Counter()
    valid = 0
    left = 0
    start, length = 0, None
    for right, ch in enumerate(s, start=1):
        window[ch] += 1
        if ch in need and window[ch] == need[ch]:
            valid += 1
        while valid == len(need):
            if length is None or right - left < length:
                start, length = left, right - left
            gone = s[left]
            left += 1
            if gone in need and window[gone] == need[gone]:
                valid -= 1
            window[gone] -= 1
    return "" if length is None else s[start : start + length]


def parse_word_list(text: str) -> list[str]:
    """Words of a text such as ``[eat, tea, tan]``; whitespace and brackets are dropped."""
    words: list[str] = []
    current: list[str] = []
    for ch in text:
        if ch.isspace() or ch in "[]":
            continue
        if ch == ",":
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(ch)
    if current:
        words.append("".join(current))
    return words
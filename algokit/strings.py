"""String algorithms: decoding, compression, justification and matching."""

from __future__ import annotations

from bisect import bisect_right
from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence
from itertools import groupby

_MINUTES_PER_DAY = 24 * 60


def first_uniq_char(s: str) -> int:
    """Index of the first character that occurs exactly once, or -1."""
    counts = Counter(s)
    return next((i for i, ch in enumerate(s) if counts[ch] == 1), -1)


def decode_string(s: str) -> str:
    """Expand ``k[text]`` groups, which may nest, into repeated text.

    Digits not followed by ``[`` are kept as literal text.
    """
    stack: list[tuple[list[str], int]] = []
    current: list[str] = []
    digits = ""
    for ch in s:
        if ch.isdigit():
            digits += ch
        elif ch == "[":
            if not digits:
                raise ValueError("a '[' must follow a repeat count")
            stack.append((current, int(digits)))
            current = []
            digits = ""
        elif ch == "]":
            if not stack:
                raise ValueError("unbalanced ']' in encoded string")
            current.append(digits)
            digits = ""
            outer, repeat = stack.pop()
            outer.append("".join(current) * repeat)
            current = outer
        else:
            current.append(digits)
            current.append(ch)
            digits = ""
    if stack:
        raise ValueError("unbalanced '[' in encoded string")
    current.append(digits)
    return "".join(current)


def compress(chars: Iterable[str]) -> list[str]:
    """Run-length compress characters: each run becomes the character and, if longer than one, its count's digits."""
    result: list[str] = []
    for ch, run in groupby(chars):
        count = sum(1 for _ in run)
        result.append(ch)
        if count > 1:
            result.extend(str(count))
    return result


def find_lus_length(a: str, b: str) -> int:
    """Length of the longest uncommon subsequence of two strings, or -1."""
    if a == b:
        return -1
    return max(len(a), len(b))


def _is_subsequence(small: str, big: str) -> bool:
    it = iter(big)
    return all(ch in it for ch in small)


def find_lus_length_many(strs: Iterable[str]) -> int:
    """Length of the longest string that is not a subsequence of any other, or -1."""
    words = sorted(strs, key=len, reverse=True)
    counts = Counter(words)
    duplicates = [word for word, count in counts.items() if count > 1]
    for word in words:
        if counts[word] > 1:
            continue
        if any(_is_subsequence(word, dup) for dup in duplicates):
            continue
        return len(word)
    return -1


def _parse_minutes(time: str) -> int:
    hours, sep, minutes = time.partition(":")
    if not sep or len(hours) != 2 or len(minutes) != 2:
        raise ValueError(f"time must look like HH:MM, got {time!r}")
    return int(hours) * 60 + int(minutes)


def find_min_difference(time_points: Iterable[str]) -> int:
    """Smallest gap in minutes between any two ``HH:MM`` times on a 24-hour clock."""
    minutes = sorted(map(_parse_minutes, time_points))
    if not minutes:
        raise ValueError("at least one time point is required")
    wrap = (minutes[0] - minutes[-1]) % _MINUTES_PER_DAY
    return min([wrap, *(b - a for a, b in zip(minutes, minutes[1:]))])


def _spread(line: list[str], max_width: int) -> str:
    if len(line) == 1:
        return line[0].ljust(max_width)
    gaps = len(line) - 1
    spare = max_width - sum(map(len, line))
    each, extra = divmod(spare, gaps)
    parts = [line[0]]
    for i, word in enumerate(line[1:]):
        parts.append(" " * (each + (i < extra)))
        parts.append(word)
    return "".join(parts)


def full_justify(words: Iterable[str], max_width: int) -> list[str]:
    """Lay words out in fully justified lines of exactly ``max_width`` characters.

    The last line is left-justified with single spaces between words.
    """
    lines: list[list[str]] = [[]]
    width = 0
    for word in words:
        if len(word) > max_width:
            raise ValueError(f"word {word!r} is wider than {max_width}")
        width += len(word)
        if width > max_width:
            lines.append([])
            width = len(word)
        lines[-1].append(word)
        width += 1
    *body, last = lines
    return [_spread(line, max_width) for line in body] + [
        " ".join(last).ljust(max_width)
    ]


def can_transform(start: str, result: str) -> bool:
    """Whether ``start`` becomes ``result`` by the moves ``XL -> LX`` and ``RX -> XR``."""
    if len(start) != len(result):
        return False
    ours = [(i, ch) for i, ch in enumerate(start) if ch != "X"]
    theirs = [(i, ch) for i, ch in enumerate(result) if ch != "X"]
    if len(ours) != len(theirs):
        return False
    for (i, ch), (j, other) in zip(ours, theirs):
        if ch != other or ch not in "LR":
            return False
        if ch == "L" and i < j:
            return False
        if ch == "R" and i > j:
            return False
    return True


def num_matching_subseq(s: str, words: Iterable[str]) -> int:
    """How many of ``words`` are subsequences of ``s``."""
    positions: defaultdict[str, list[int]] = defaultdict(list)
    for i, ch in enumerate(s):
        positions[ch].append(i)

    def matches(word: str) -> bool:
        prev = -1
        for ch in word:
            where = positions.get(ch)
            if not where:
                return False
            k = bisect_right(where, prev)
            if k == len(where):
                return False
            prev = where[k]
        return True

    return sum(1 for word in words if matches(word))


def find_replace_string(
    s: str,
    indices: Sequence[int],
    sources: Sequence[str],
    targets: Sequence[str],
) -> str:
    """Apply simultaneous replacements of ``sources[i]`` at ``indices[i]`` by ``targets[i]``.

    A replacement happens only where the source text really occurs; the first
    matching operation at an index wins.
    """
    replacements: dict[int, tuple[str, str]] = {}
    for index, source, target in zip(indices, sources, targets, strict=True):
        if index in replacements:
            continue
        if not source:
            raise ValueError("source strings must not be empty")
        if s.startswith(source, index):
            replacements[index] = (source, target)
    parts: list[str] = []
    pos = 0
    while pos < len(s):
        if pos in replacements:
            source, target = replacements[pos]
            parts.append(target)
            pos += len(source)
        else:
            parts.append(s[pos])
            pos += 1
    return "".join(parts)


def _shape(word: str) -> list[int]:
    first_seen: dict[str, int] = {}
    return [first_seen.setdefault(ch, len(first_seen)) for ch in word]


def find_and_replace_pattern(words: Iterable[str], pattern: str) -> list[str]:
    """Words that map onto ``pattern`` by a one-to-one letter substitution."""
    wanted = _shape(pattern)
    return [
        word for word in words if len(word) == len(pattern) and _shape(word) == wanted
    ]


def orderly_queue(s: str, k: int) -> str:
    """Smallest string reachable by moving one of the first ``k`` letters to the end."""
    if k == 1:
        return min((s[i:] + s[:i] for i in range(len(s))), default=s)
    return "".join(sorted(s))


def num_decodings(s: str) -> int:
    """Number of ways to read a digit string as letters ``1 -> A`` ... ``26 -> Z``."""
    if any(ch not in "0123456789" for ch in s):
        raise ValueError("s must hold digits only")
    n = len(s)
    ways = [0] * (n + 2)
    ways[n] = 1
    for i in reversed(range(n)):
        if s[i] == "0":
            ways[i] = 0
            continue
        pair = int(s[i : i + 2])
        if pair in (10, 20):
            ways[i] = ways[i + 2]
        else:
            ways[i] = ways[i + 1] + (ways[i + 2] if 11 <= pair <= 26 else 0)
    return ways[0]


def longest_subsequence(words: Sequence[str], groups: Sequence[int]) -> list[str]:
    """Longest subsequence of words whose adjacent picks come from different groups."""
    if len(words) != len(groups):
        raise ValueError("words and groups must have the same length")
    picked: list[str] = []
    last_group: int | None = None
    for word, group in zip(words, groups):
        if not picked or group != last_group:
            picked.append(word)
            last_group = group
    return picked
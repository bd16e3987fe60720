"""Levenshtein distance between command names."""


def edit_distance(source: str, target: str) -> int:
    """Return the minimum number of single-character edits turning source into target.

    Uses the two-row dynamic programming formulation, so cost is
    O(len(source) * len(target)) time and O(len(target)) memory.
    """
    if not source:
        return len(target)
    if not target:
        return len(source)

    previous = list(range(len(target) + 1))
    for i, source_char in enumerate(source, start=1):
        current = [i]
        for j, target_char in enumerate(target, start=1):
            substitution = previous[j - 1] + (source_char != target_char)
            current.append(min(previous[j] + 1, current[j - 1] + 1, substitution))
        previous = current

    return previous[-1]

"""
Prefix filtering and ordering of completion candidates.

A candidate survives the filter when its label starts with the prefix (case
insensitively) or when the prefix matches the label's camel-case humps, so
`gEBI` finds `getElementById`. Survivors are ordered by: exact match, the
item's own sort order, known before unknown, how well the prefix matched,
recency of acceptance, labels ending in `(` last, and finally the label.
"""

import re
from collections import OrderedDict
from typing import Iterable, List, Optional

from .item import CompletionItem

# Positions where a hump starts: the first character, an upper-case letter after
# a lower-case one or a digit, and any word character after a separator.
HUMP_START = re.compile(r"^.|(?<=[a-z0-9])[A-Z]|(?<=[_\-$.:])[A-Za-z0-9]")

EXACT_MATCH = 0
CASE_SENSITIVE_PREFIX = 1
CASE_INSENSITIVE_PREFIX = 2
CAMEL_HUMP = 3
NO_MATCH = 4


def _hump_starts(label: str) -> List[int]:
    return [match.start() for match in HUMP_START.finditer(label)]


def _match_humps(prefix: str, label: str, prefix_index: int, label_index: int, starts: List[int]) -> bool:
    if prefix_index == len(prefix):
        return True
    wanted = prefix[prefix_index]
    # Either keep going inside the current hump...
    if label_index < len(label) and label[label_index].lower() == wanted:
        if _match_humps(prefix, label, prefix_index + 1, label_index + 1, starts):
            return True
    # ...or jump to the start of a later one.
    for start in starts:
        if start > label_index and label[start].lower() == wanted:
            if _match_humps(prefix, label, prefix_index + 1, start + 1, starts):
                return True
    return False


def camel_hump_match(prefix: str, label: str) -> bool:
    """True when every prefix character continues the current hump or starts a later one."""
    if not prefix:
        return True
    if not label or label[0].lower() != prefix[0].lower():
        return False
    return _match_humps(prefix.lower(), label, 1, 1, _hump_starts(label))


def match_rank(label: str, prefix: str) -> int:
    if not prefix:
        return EXACT_MATCH if not label else CASE_SENSITIVE_PREFIX
    if label.lower() == prefix.lower():
        return EXACT_MATCH
    if label.startswith(prefix):
        return CASE_SENSITIVE_PREFIX
    if label.lower().startswith(prefix.lower()):
        return CASE_INSENSITIVE_PREFIX
    if camel_hump_match(prefix, label):
        return CAMEL_HUMP
    return NO_MATCH


def matches_prefix(label: str, prefix: Optional[str]) -> bool:
    return not prefix or match_rank(label, prefix) != NO_MATCH


class RecencyTracker:
    """Remembers the most recently accepted labels; later acceptances score higher."""

    def __init__(self, capacity: int = 200):
        self.capacity = capacity
        self._accepted: "OrderedDict[str, int]" = OrderedDict()
        self._clock = 0

    def record(self, label: str):
        self._clock += 1
        self._accepted.pop(label, None)
        self._accepted[label] = self._clock
        while len(self._accepted) > self.capacity:
            self._accepted.popitem(last=False)

    def score(self, label: str) -> int:
        return self._accepted.get(label, 0)

    def clear(self):
        self._accepted.clear()
        self._clock = 0

    def __len__(self) -> int:
        return len(self._accepted)


def dedupe(items: Iterable[CompletionItem]) -> List[CompletionItem]:
    """Keeps the first item for every label."""
    seen = set()
    unique = []
    for item in items:
        if item.label not in seen:
            seen.add(item.label)
            unique.append(item)
    return unique


def rank_items(
    items: Iterable[CompletionItem],
    prefix: Optional[str] = None,
    recency: Optional[RecencyTracker] = None,
    limit: Optional[int] = None,
    by_label: bool = True,
) -> List[CompletionItem]:
    """
    Filters `items` by `prefix` and sorts them. With `by_label=False` the
    incoming order breaks ties instead of the label, which keeps a member
    list's properties-before-methods grouping intact.
    """
    prefix = prefix or ""
    lowered = prefix.lower()

    def key(item: CompletionItem):
        label = item.label
        ordering = (
            bool(prefix) and label.lower() != lowered,
            item.sort_order,
            item.is_unknown,
            match_rank(label, prefix),
            -(recency.score(label) if recency else 0),
            label.endswith("("),
        )
        return ordering + ((label.lower(), label) if by_label else ())

    ranked = sorted((item for item in items if matches_prefix(item.label, prefix)), key=key)
    return ranked[:limit] if limit is not None else ranked

"""Domain value object for the user's current search and filter inputs."""

from dataclasses import dataclass, field, replace
from typing import Iterable

NumericRange = tuple[float | None, float | None]


@dataclass(frozen=True)
class FilterState:
    """Independent, conjunctive predicate inputs for one collection.

    ``selectors`` holds categorical values keyed by attribute path; an empty
    string means "no constraint". ``ranges`` holds inclusive bounds keyed by
    attribute path; a ``None`` bound is open.

    Every ``with_*`` method returns a new state and never mutates this one.
    """

    search: str = ""
    selectors: dict[str, str] = field(default_factory=dict)
    ranges: dict[str, NumericRange] = field(default_factory=dict)

    def with_search(self, term: str) -> "FilterState":
        return replace(self, search=term)

    def with_selector(
        self,
        key: str,
        value: str | None,
        dependents: Iterable[str] = (),
    ) -> "FilterState":
        """Set a categorical selector.

        When the value actually changes, every selector listed in
        ``dependents`` is reset to empty.
        """
        value = value or ""
        selectors = dict(self.selectors)
        changed = selectors.get(key, "") != value
        selectors[key] = value
        if changed:
            for child in dependents:
                selectors[child] = ""
        return replace(self, selectors=selectors)

    def with_range(
        self, key: str, lower: float | None, upper: float | None
    ) -> "FilterState":
        ranges = dict(self.ranges)
        ranges[key] = (lower, upper)
        return replace(self, ranges=ranges)

    def selector(self, key: str) -> str:
        return self.selectors.get(key, "")

    @property
    def is_empty(self) -> bool:
        return (
            not self.search.strip()
            and not any(self.selectors.values())
            and all(lo is None and hi is None for lo, hi in self.ranges.values())
        )

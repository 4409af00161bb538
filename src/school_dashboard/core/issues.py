from __future__ import annotations

from dataclasses import dataclass, field

from .exceptions import DataIssue
from .logger import get_logger

log = get_logger(__name__)


@dataclass
class IssueCollector:
    """Side channel for data issues met while filtering/bucketing/aggregating.

    Aggregation code reports here instead of raising, so one bad record never
    aborts a whole dashboard compute. The same issue reported twice (several
    metrics read the same bad record) is kept once.
    """

    issues: list[DataIssue] = field(default_factory=list)
    _seen: set[tuple[str, str]] = field(default_factory=set, repr=False)

    def report(self, issue: DataIssue) -> None:
        k = (type(issue).__name__, str(issue))
        if k in self._seen:
            return
        self._seen.add(k)
        log.warning("%s: %s", k[0], issue)
        self.issues.append(issue)

    def of_type(self, kind: type[DataIssue]) -> list[DataIssue]:
        return [i for i in self.issues if isinstance(i, kind)]

    def __iter__(self):
        return iter(self.issues)

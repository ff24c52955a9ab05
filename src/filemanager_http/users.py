"""User principal with path rules."""

from __future__ import annotations

import re
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Rule:
    """Allow or deny access to paths starting with ``path``.

    With ``regex=True`` the path is a regular expression searched in the
    request path instead.
    """

    path: str
    allow: bool = True
    regex: bool = False
    _pattern: re.Pattern[str] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if self.regex:
            object.__setattr__(self, "_pattern", re.compile(self.path))

    def matches(self, url: str) -> bool:
        if self._pattern is not None:
            return self._pattern.search(url) is not None
        return url.startswith(self.path)


@dataclass
class User:
    """A principal whose file paths resolve inside ``scope``."""

    username: str
    scope: str
    rules: list[Rule] = field(default_factory=list)

    def allowed(self, path: str) -> bool:
        """Later rules take precedence; no matching rule means allowed."""
        for rule in reversed(self.rules):
            if rule.matches(path):
                return rule.allow
        return True

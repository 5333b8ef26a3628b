"""Build environment placeholder expansion.

Expansion rules follow the usual CI host macro syntax:
  ${NAME}  — replaced with the variable value when NAME is known
  $NAME    — same, NAME is [A-Za-z0-9_]+
  $$       — a literal dollar sign
Unknown names are left in place verbatim, so callers can detect an
unexpanded placeholder by comparing the result with the input token.
"""

import os
import re
from collections.abc import Mapping
from typing import Optional

_MACRO_PATTERN = re.compile(r"\$(\{[A-Za-z0-9_.]+\}|[A-Za-z0-9_]+|\$)")


class BuildEnvironment:
    """Read-only view of the variables of one build invocation."""

    def __init__(self, variables: Optional[Mapping[str, str]] = None):
        self._variables = dict(variables or {})

    @classmethod
    def from_os(cls) -> "BuildEnvironment":
        """Snapshot the current process environment."""
        return cls(os.environ)

    def get(self, name: str) -> Optional[str]:
        return self._variables.get(name)

    def expand(self, text: Optional[str]) -> Optional[str]:
        """Expand placeholders in text. None passes through unchanged."""
        if not text or "$" not in text:
            return text

        def _replace(match: re.Match) -> str:
            token = match.group(1)
            if token == "$":
                return "$"
            name = token[1:-1] if token.startswith("{") else token
            value = self._variables.get(name)
            return match.group(0) if value is None else value

        return _MACRO_PATTERN.sub(_replace, text)

    def expand_or_unknown(self, placeholder: str) -> str:
        """Expand a single placeholder, or return "unknown" if it stays literal.

        A variable that is set but empty expands to "".
        """
        value = self.expand(placeholder)
        if value == placeholder:
            return "unknown"
        return value

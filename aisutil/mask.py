"""Shell-style wildcard masks."""

import re


def _bracket_end(pattern, start):
    """Return the index of the ']' closing a bracket opened before *start*."""
    pos = start
    if pos < len(pattern) and pattern[pos] in "!^":
        pos += 1
    if pos < len(pattern) and pattern[pos] == "]":
        pos += 1
    end = pattern.find("]", pos)
    return None if end < 0 else end


def _bracket(body):
    negate = body[:1] in ("!", "^")
    if negate:
        body = body[1:]
    members = "".join("\\" + ch if ch in "\\[]^&~|" else ch for ch in body)
    return "[" + ("^" if negate else "") + members + "]"


def _translate(pattern):
    """Translate a wildcard pattern into a regular expression."""
    parts = []
    pos = 0
    length = len(pattern)
    while pos < length:
        char = pattern[pos]
        pos += 1
        if char == "*":
            parts.append(".*")
        elif char == "?":
            parts.append(".")
        elif char == "\\":
            if pos < length:
                parts.append(re.escape(pattern[pos]))
                pos += 1
            else:
                parts.append(re.escape("\\"))
        elif char == "[":
            end = _bracket_end(pattern, pos)
            if end is None:
                parts.append(re.escape("["))
            else:
                parts.append(_bracket(pattern[pos:end]))
                pos = end + 1
        else:
            parts.append(re.escape(char))
    return "".join(parts)


class StringMask:
    """A wildcard mask supporting '*', '?', bracket sets and '\\' escapes."""

    def __init__(self, pattern):
        self.pattern = pattern
        expression = _translate(pattern)
        self._case_sensitive = re.compile(expression, re.DOTALL)
        self._case_insensitive = re.compile(expression, re.DOTALL | re.IGNORECASE)

    def __str__(self):
        return self.pattern

    def __repr__(self):
        return f"StringMask({self.pattern!r})"

    def matches(self, text):
        """Return whether *text* matches the mask, ignoring case."""
        return self._case_insensitive.fullmatch(text) is not None

    def matches_case(self, text):
        """Return whether *text* matches the mask, respecting case."""
        return self._case_sensitive.fullmatch(text) is not None
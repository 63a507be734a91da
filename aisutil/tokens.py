"""A string with a cursor for pulling out successive tokens."""

_SPACE = frozenset(" \t\n\v\f\r")


class StringTokens:
    """Split *text* into tokens, one at a time, starting at *position*."""

    def __init__(self, text, position=0):
        self.text = text
        self.position = position

    def __repr__(self):
        return f"StringTokens({self.text!r}, {self.position})"

    def _check_start(self, start):
        if start > len(self.text):
            raise IndexError(f"token position {start} is past the end of the text")

    def count_tokens(self, delimiter=None):
        """Count tokens separated by whitespace, or by *delimiter* if given."""
        if not self.text:
            return 0
        if delimiter is not None:
            return self.text.count(delimiter) + 1
        count = 1
        previous = ""
        for char in self.text:
            if char in _SPACE and previous not in _SPACE:
                count += 1
            previous = char
        return count

    def next_token(self, delimiter=None):
        """Return the next token and advance past it.

        Without *delimiter* leading whitespace is skipped and the token ends
        at the next whitespace character. With a single-character
        *delimiter* the token runs up to the next delimiter, so empty tokens
        are possible. Reading past the final delimited token raises
        IndexError.
        """
        text = self.text
        start = self.position
        self._check_start(start)
        if delimiter is not None:
            if len(delimiter) != 1:
                raise ValueError("delimiter must be a single character")
            end = text.find(delimiter, start)
            if end < 0:
                end = len(text)
            self.position = end + 1
            return text[start:end]

        while start < len(text) and text[start] in _SPACE:
            start += 1
        for end in range(start, len(text)):
            if text[end] in _SPACE:
                self.position = end + 1
                return text[start:end]
        self.position = len(text)
        return text[start:]

    def next_colon_token(self):
        """Return the rest of the text after a leading ':', else the next token."""
        text = self.text
        if self.position >= len(text):
            return ""
        if text[self.position] == ":":
            start = self.position + 1
            self.position = len(text)
            return text[start:]
        return self.next_token()
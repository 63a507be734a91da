"""SHA-1 digests for comparing hashed values such as passwords."""

import hashlib

from aisutil.text import prepad
from aisutil.utils import base_x_str

DIGEST_SIZE = 20
_WORD_SIZE = 4


class SHA1Digest:
    """A 160-bit SHA-1 digest.

    Built from bytes or text (text is hashed as UTF-8). With no data the
    digest is all zeroes, which is_null() reports.
    """

    __slots__ = ("_digest",)

    def __init__(self, data=None):
        if data is None:
            self._digest = bytes(DIGEST_SIZE)
            return
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._digest = hashlib.sha1(data).digest()

    def __eq__(self, other):
        if not isinstance(other, SHA1Digest):
            return NotImplemented
        return self._digest == other._digest

    def __hash__(self):
        return hash(self._digest)

    def __bytes__(self):
        return self._digest

    def __repr__(self):
        return f"SHA1Digest<{self._digest.hex()}>"

    def is_null(self):
        """Return whether every bit of the digest is zero."""
        return not any(self._digest)

    def words(self):
        """Return the digest as five big-endian 32-bit words."""
        return [
            int.from_bytes(self._digest[offset:offset + _WORD_SIZE], "big")
            for offset in range(0, DIGEST_SIZE, _WORD_SIZE)
        ]

    def to_str(self, base, pad):
        """Write each 32-bit word in *base*, left-padded with '0' to *pad*, joined."""
        return "".join(prepad(base_x_str(word, base), pad, "0") for word in self.words())
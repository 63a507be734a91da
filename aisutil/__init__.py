"""Small utilities: text helpers, tokenising, wildcard masks, UTF-8 checks, timestamps, peak counters, SHA-1 digests and socket options."""

__version__ = "0.1.0"
import hashlib

import pytest

from aisutil.digest import SHA1Digest

ABC_SHA1_HEX = "a9993e364706816aba3e25717850c26c9cd0d89d"


def test_known_vector_in_base_16():
    assert SHA1Digest(b"abc").to_str(16, 8).lower() == ABC_SHA1_HEX


def test_bytes_match_standard_sha1():
    data = b"The quick brown fox"
    assert bytes(SHA1Digest(data)) == hashlib.sha1(data).digest()


def test_text_is_hashed_as_utf8():
    assert SHA1Digest("abc") == SHA1Digest(b"abc")
    assert SHA1Digest("h\u00e9llo") == SHA1Digest("h\u00e9llo".encode("utf-8"))


def test_default_digest_is_null():
    digest = SHA1Digest()
    assert digest.is_null()
    assert bytes(digest) == bytes(20)


def test_hashed_digest_is_not_null():
    assert not SHA1Digest(b"abc").is_null()


def test_equality_and_inequality():
    assert SHA1Digest(b"one") == SHA1Digest(b"one")
    assert not (SHA1Digest(b"one") == SHA1Digest(b"two"))
    assert SHA1Digest(b"one") != SHA1Digest(b"two")


def test_usable_as_dict_key():
    table = {SHA1Digest(b"key"): "stored"}
    assert table[SHA1Digest(b"key")] == "stored"


def test_null_digest_pads_every_word():
    assert SHA1Digest().to_str(16, 8) == "0" * 40


@pytest.mark.parametrize("data", [b"", b"abc", b"\x00\xff" * 40])
def test_binary_output_round_trips_to_digest(data):
    digest = SHA1Digest(data)
    text = digest.to_str(2, 32)
    assert len(text) == 160
    chunks = [text[pos:pos + 32] for pos in range(0, 160, 32)]
    rebuilt = b"".join(int(chunk, 2).to_bytes(4, "big") for chunk in chunks)
    assert rebuilt == bytes(digest)


def test_words_cover_the_digest():
    digest = SHA1Digest(b"words")
    words = digest.words()
    assert len(words) == 5
    assert b"".join(word.to_bytes(4, "big") for word in words) == bytes(digest)


def test_invalid_base_raises():
    with pytest.raises(ValueError):
        SHA1Digest(b"abc").to_str(1, 0)
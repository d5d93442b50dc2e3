import hashlib

import pytest

from xdccget.hashing import HashAlgorithm, HashType, create_hash_algorithm


@pytest.fixture
def md5():
    algo = create_hash_algorithm("MD5")
    assert algo is not None
    return algo


def test_create_md5(md5):
    assert md5.hash_type is HashType.MD5
    assert md5.hash_size == 16


@pytest.mark.parametrize("name", ["md5", "SHA1", ""])
def test_unknown_algorithm(name):
    assert create_hash_algorithm(name) is None


def test_hash_string_matches_reference(md5):
    assert md5.hash_string("hello world") == hashlib.md5(b"hello world").digest()


def test_hash_string_empty(md5):
    assert md5.hash_string("").hex() == "d41d8cd98f00b204e9800998ecf8427e"


def test_hash_string_iterations(md5):
    assert md5.hash_string("ab", 3) == md5.hash_string("ababab")


def test_hash_string_zero_iterations_is_empty_digest(md5):
    assert md5.hash_string("abc", 0) == md5.hash_string("")


def test_hash_file(md5, tmp_path):
    payload = bytes(range(256)) * 100
    path = tmp_path / "download.bin"
    path.write_bytes(payload)
    assert md5.hash_file(path) == hashlib.md5(payload).digest()


def test_hash_file_missing(md5, tmp_path):
    with pytest.raises(FileNotFoundError):
        md5.hash_file(tmp_path / "missing")


def test_hex_to_binary_round_trip(md5):
    digest = hashlib.md5(b"xdcc").digest()
    assert md5.hex_to_binary(digest.hex()) == digest
    assert md5.hex_to_binary(digest.hex().upper()) == digest


def test_hex_to_binary_invalid_chars_are_zero(md5):
    assert md5.hex_to_binary("zz" * 16) == bytes(16)


def test_hex_to_binary_ignores_extra(md5):
    digest = hashlib.md5(b"abc").digest()
    assert md5.hex_to_binary(digest.hex() + "ffff") == digest


def test_hex_to_binary_too_short(md5):
    with pytest.raises(ValueError):
        md5.hex_to_binary("abcd")


def test_equals(md5):
    a = hashlib.md5(b"a").digest()
    b = hashlib.md5(b"b").digest()
    assert md5.equals(a, a) is True
    assert md5.equals(a, b) is False


def test_equals_with_converted_hex(md5, tmp_path):
    path = tmp_path / "f"
    path.write_bytes(b"content")
    expected = md5.hex_to_binary(hashlib.md5(b"content").hexdigest())
    assert md5.equals(md5.hash_file(path), expected) is True


def test_direct_construction_matches_factory(md5):
    assert HashAlgorithm(HashType.MD5) == md5
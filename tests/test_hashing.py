import hashlib

import pytest

from puzzle_proof.curves import BLS12_381, BN254
from puzzle_proof.hashing import chain_digest, from_int, get_hash, to_int


def test_empty_string_hash():
    h = chain_digest([""], get_hash("blake2b-224"))
    assert h.hex() == "836cc68931c2e4e3e838602eca1902591d216837bafddfe6f0c8cb07"


def test_empty_chain_is_hash_of_nothing():
    assert chain_digest([], get_hash("blake2b-224")) == chain_digest(
        [""], get_hash("blake2b-224")
    )


def test_sha256_hash():
    h = chain_digest(["a", "bc"], get_hash("sha256"))
    assert h.hex() == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


def test_hash_to_int():
    # blake2b-224 of 0xacab
    digest = bytes.fromhex("09c4a38a350818fcabc9eba223519d9539f072185bb6e7c0e29ea392")
    n = to_int(digest, BLS12_381.order)
    assert n == 1028703146767339290293633951186123731886171864122866591065320629138


def test_unknown_hash():
    with pytest.raises(ValueError, match="Unknown hash"):
        get_hash("md5")


def test_chain_is_one_running_digest():
    solutions = ["solution1", "solution2", "solution3"]
    d = chain_digest(solutions, get_hash("sha256"))
    assert d == hashlib.sha256(b"solution1solution2solution3").digest()
    assert d != hashlib.sha256(
        b"".join(hashlib.sha256(s.encode()).digest() for s in solutions)
    ).digest()


def test_chain_encodes_utf8():
    d = chain_digest(["é"], get_hash("sha256"))
    assert d == hashlib.sha256("é".encode("utf-8")).digest()


def test_from_int_is_fixed_width():
    assert from_int(1, BN254.scalar_size) == b"\x00" * 31 + b"\x01"
    with pytest.raises(OverflowError):
        from_int(1 << 256, 32)


if __name__ == "__main__":
    pytest.main()

# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import pytest

from puzzle_proof.curves import BLS12_381, BN254
from puzzle_proof.encoding import decode_point, decode_scalar, encode_point, encode_scalar
from puzzle_proof.errors import SerializationError


def test_encode_bn254_generator():
    x, y = encode_point(BN254, BN254.generator)
    assert x == (1).to_bytes(32, "big")
    assert y == (2).to_bytes(32, "big")


def test_encode_bls_generator():
    x, y = encode_point(BLS12_381, BLS12_381.generator)
    assert len(x) == len(y) == 48
    assert (
        x.hex()
        == "17f1d3a73197d7942695638c4fa9ac0fc3688c4f9774b905a14e3a3f171bac586c55e83ff97a1aeffb3af00adb22c6bb"
    )


def test_encode_point_is_representation_independent():
    # same point reached through different projective coordinates
    p1 = BN254.multiply(BN254.generator, 6)
    p2 = BN254.add(BN254.multiply(BN254.generator, 2), BN254.multiply(BN254.generator, 4))
    assert encode_point(BN254, p1) == encode_point(BN254, p2)


def test_encode_identity_fails():
    with pytest.raises(SerializationError, match="infinity"):
        encode_point(BN254, BN254.identity)


def test_encode_scalar_is_reduced_and_fixed_width():
    assert encode_scalar(BN254, 1) == b"\x00" * 31 + b"\x01"
    assert encode_scalar(BN254, BN254.order + 1) == encode_scalar(BN254, 1)
    assert encode_scalar(BN254, -1) == (BN254.order - 1).to_bytes(32, "big")
    assert len(encode_scalar(BLS12_381, 0)) == 32


@pytest.mark.parametrize("group", [BN254, BLS12_381], ids=lambda g: g.name)
def test_decode_point_inverts_encode(group):
    point = group.multiply(group.generator, 987654321)
    x, y = encode_point(group, point)
    assert group.eq(decode_point(group, x, y), point)


def test_decode_point_rejects_wrong_length():
    x, y = encode_point(BN254, BN254.generator)
    with pytest.raises(SerializationError, match="32 bytes"):
        decode_point(BN254, x[1:], y)


def test_decode_point_rejects_off_curve():
    with pytest.raises(SerializationError):
        decode_point(BN254, (1).to_bytes(32, "big"), (3).to_bytes(32, "big"))


def test_decode_point_rejects_non_canonical():
    x = (BN254.field_modulus + 1).to_bytes(32, "big")
    with pytest.raises(SerializationError):
        decode_point(BN254, x, (2).to_bytes(32, "big"))


def test_decode_scalar():
    assert decode_scalar(BN254, encode_scalar(BN254, 42)) == 42
    with pytest.raises(SerializationError, match="reduced"):
        decode_scalar(BN254, BN254.order.to_bytes(32, "big"))
    with pytest.raises(SerializationError, match="32 bytes"):
        decode_scalar(BN254, b"\x01")


if __name__ == "__main__":
    pytest.main()

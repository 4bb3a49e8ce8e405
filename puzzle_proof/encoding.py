# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
"""
Canonical byte encoding of group elements and scalars.

Every value is a fixed-length big-endian byte string holding the least
non-negative residue, so that an independently written verifier (for example
an on-chain contract) reads exactly the same numbers.
"""
from puzzle_proof.curves import Group, Point
from puzzle_proof.errors import SerializationError
from puzzle_proof.hashing import from_int


def encode_point(group: Group, point: Point) -> tuple[bytes, bytes]:
    """
    Encode a point as its affine coordinates.

    Args:
        group: The group the point belongs to.
        point: A projective point.

    Returns:
        A tuple `(x_bytes, y_bytes)`, each `group.coordinate_size` bytes.

    Raises:
        SerializationError: If the point is the identity, which has no
            affine coordinates.
    """
    x, y = group.affine(point)
    return from_int(x, group.coordinate_size), from_int(y, group.coordinate_size)


def encode_scalar(group: Group, scalar: int) -> bytes:
    """
    Encode a scalar reduced modulo the group order.

    Returns:
        bytes: `group.scalar_size` big-endian bytes.
    """
    return from_int(scalar % group.order, group.scalar_size)


def decode_point(group: Group, x_bytes: bytes, y_bytes: bytes) -> Point:
    """
    Decode and validate a point produced by `encode_point`.

    Raises:
        SerializationError: If a coordinate has the wrong length, is not
            canonical, or the point is not in the group.
    """
    for coordinate in (x_bytes, y_bytes):
        if len(coordinate) != group.coordinate_size:
            raise SerializationError(
                f"{group.name} coordinate must be {group.coordinate_size} bytes, "
                f"got {len(coordinate)}"
            )
    return group.from_affine(
        int.from_bytes(x_bytes, "big"), int.from_bytes(y_bytes, "big")
    )


def decode_scalar(group: Group, data: bytes) -> int:
    """
    Decode a scalar produced by `encode_scalar`.

    Raises:
        SerializationError: If the length is wrong or the value is not
            below the group order.
    """
    if len(data) != group.scalar_size:
        raise SerializationError(
            f"{group.name} scalar must be {group.scalar_size} bytes, got {len(data)}"
        )
    scalar = int.from_bytes(data, "big")
    if scalar >= group.order:
        raise SerializationError(f"scalar is not reduced modulo the {group.name} order")
    return scalar

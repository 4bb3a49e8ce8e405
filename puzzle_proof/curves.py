# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import secrets
from types import ModuleType
from typing import Any

from eth_typing import BLSPubkey
from py_ecc import optimized_bls12_381, optimized_bn128
from py_ecc.bls.g2_primitives import G1_to_pubkey, pubkey_to_G1
from py_ecc.fields import optimized_bls12_381_FQ, optimized_bn128_FQ

from puzzle_proof.errors import SerializationError

# py_ecc projective point (x, y, z)
Point = tuple[Any, Any, Any]

# process wide CSPRNG, thread-safe
system_random = secrets.SystemRandom()


def random_scalar(group: "Group", source: Any = None) -> int:
    """
    Draw a uniformly random scalar in [1, order) for `group`.

    Args:
        group: The group whose order bounds the scalar.
        source: Any object with `randrange(start, stop)`. Defaults to the
            process wide `secrets.SystemRandom` instance.

    Returns:
        int: The random scalar.
    """
    source = source if source is not None else system_random
    return source.randrange(1, group.order)


class Group:
    """
    A prime-order elliptic-curve group (the G1 subgroup of a py_ecc curve).

    Points are py_ecc optimized projective tuples; compare them with `eq`,
    never with `==`, since one point has many projective representations.
    """

    def __init__(self, name: str, curve: ModuleType, field: type):
        self.name = name
        self._curve = curve
        self.field = field
        self.order: int = curve.curve_order
        self.field_modulus: int = curve.field_modulus
        self.generator: Point = curve.G1
        self.identity: Point = curve.Z1
        self.coordinate_size = (self.field_modulus.bit_length() + 7) // 8
        self.scalar_size = (self.order.bit_length() + 7) // 8
        # challenge integers keep this many bits so they stay below the order
        self.challenge_bits = self.order.bit_length() - 1

    def __repr__(self) -> str:
        return f"Group({self.name!r})"

    def add(self, left: Point, right: Point) -> Point:
        return self._curve.add(left, right)

    def multiply(self, point: Point, scalar: int) -> Point:
        return self._curve.multiply(point, scalar % self.order)

    def eq(self, left: Point, right: Point) -> bool:
        return self._curve.eq(left, right)

    def is_identity(self, point: Point) -> bool:
        return point[2] == 0

    def is_on_curve(self, point: Point) -> bool:
        return self._curve.is_on_curve(point, self._curve.b)

    def in_subgroup(self, point: Point) -> bool:
        """Return True if `point` has order dividing the group order."""
        return self.is_identity(self._curve.multiply(point, self.order))

    def affine(self, point: Point) -> tuple[int, int]:
        """
        Convert a projective point to canonical affine integer coordinates.

        py_ecc silently maps the point at infinity to (0, 0), which is not
        a curve point, so the identity is rejected here.

        Raises:
            SerializationError: If the point is the identity.
        """
        if self.is_identity(point):
            raise SerializationError(
                f"point at infinity has no affine encoding on {self.name}"
            )
        x, y = self._curve.normalize(point)
        return x.n % self.field_modulus, y.n % self.field_modulus

    def from_affine(self, x: int, y: int) -> Point:
        """
        Build a projective point from affine coordinates and validate it.

        Raises:
            SerializationError: If a coordinate is not a canonical field
                element or the point is not in the prime-order subgroup.
        """
        if not (0 <= x < self.field_modulus and 0 <= y < self.field_modulus):
            raise SerializationError(f"coordinate out of range for {self.name}")
        point = (self.field(x), self.field(y), self.field.one())
        if not self.is_on_curve(point):
            raise SerializationError(f"point is not on the {self.name} curve")
        if not self.in_subgroup(point):
            raise SerializationError(
                f"point is not in the prime-order subgroup of {self.name}"
            )
        return point

    def to_hex(self, point: Point) -> str:
        """
        Compact artifact encoding: x || y, each fixed-length big-endian.
        """
        x, y = self.affine(point)
        return (
            x.to_bytes(self.coordinate_size, "big")
            + y.to_bytes(self.coordinate_size, "big")
        ).hex()

    def from_hex(self, element: str) -> Point:
        try:
            data = bytes.fromhex(element)
        except ValueError as e:
            raise SerializationError(f"invalid hex point encoding: {e}") from None
        if len(data) != 2 * self.coordinate_size:
            raise SerializationError(
                f"{self.name} point must be {2 * self.coordinate_size} bytes, "
                f"got {len(data)}"
            )
        x = int.from_bytes(data[: self.coordinate_size], "big")
        y = int.from_bytes(data[self.coordinate_size :], "big")
        return self.from_affine(x, y)


class BLS12381Group(Group):
    """
    BLS12-381 G1, with artifacts in the 48 byte ZCash compressed format.
    """

    def to_hex(self, point: Point) -> str:
        return G1_to_pubkey(point).hex()

    def from_hex(self, element: str) -> Point:
        if len(element) != 96:
            raise SerializationError(
                f"compressed G1 point must be 48 bytes, got {len(element) // 2}"
            )
        try:
            point = pubkey_to_G1(BLSPubkey(bytes.fromhex(element)))
        except ValueError as e:
            raise SerializationError(f"invalid compressed G1 point: {e}") from None
        if self.is_identity(point):
            return point
        if not self.in_subgroup(point):
            raise SerializationError(
                f"point is not in the prime-order subgroup of {self.name}"
            )
        return point


BN254 = Group("bn254", optimized_bn128, optimized_bn128_FQ)
BLS12_381 = BLS12381Group("bls12-381", optimized_bls12_381, optimized_bls12_381_FQ)

GROUPS: dict[str, Group] = {group.name: group for group in (BN254, BLS12_381)}


def get_group(name: str) -> Group:
    """
    Look up a supported group by its agreed name.

    Raises:
        ValueError: If the name is unknown.
    """
    try:
        return GROUPS[name]
    except KeyError:
        raise ValueError(
            f"Unknown group {name!r}, expected one of {sorted(GROUPS)}"
        ) from None

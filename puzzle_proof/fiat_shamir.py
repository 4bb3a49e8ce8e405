# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
from typing import Callable, Sequence

from puzzle_proof.curves import Group, Point
from puzzle_proof.encoding import encode_point


def reduce_challenge(group: Group, digest: bytes) -> int:
    """
    Map a digest to a challenge scalar strictly below the group order.

    The most-significant bits of the digest are masked off so that the
    integer keeps `group.challenge_bits` bits, then it is reduced modulo the
    order. Digests shorter than that are used as they are.

    Args:
        group: The group whose order bounds the challenge.
        digest: Raw hash output.

    Returns:
        int: The challenge scalar.
    """
    value = int.from_bytes(digest, "big")
    if len(digest) * 8 > group.challenge_bits:
        value &= (1 << group.challenge_bits) - 1
    return value % group.order


def challenge(
    group: Group,
    elements: Sequence[Point],
    hash_fn: Callable,
    message: bytes | None = None,
) -> int:
    """
    Derive the Fiat-Shamir challenge from a transcript of group elements.

    The transcript is

        x(e1) || y(e1) || x(e2) || y(e2) || ... || message

    using the canonical coordinate encoding. Prover and verifier (including
    any external verifier) must feed the elements in the same order.

    Args:
        group: The group of the elements.
        elements: Ordered transcript elements.
        hash_fn: Hash constructor from `puzzle_proof.hashing.get_hash`.
        message: Optional bytes bound into the transcript after the elements.
            It must not be empty, since `b""` would give the same transcript
            as no message.

    Returns:
        int: The challenge scalar in [0, order).

    Raises:
        SerializationError: If an element is the identity.
        ValueError: If `message` is empty.
    """
    if message is not None and not message:
        raise ValueError("bound message must not be empty")
    state = hash_fn()
    for element in elements:
        x, y = encode_point(group, element)
        state.update(x)
        state.update(y)
    if message is not None:
        state.update(message)
    return reduce_challenge(group, state.digest())

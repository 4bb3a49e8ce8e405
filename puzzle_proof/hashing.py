# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

import hashlib
from functools import partial
from typing import Callable, Iterable

# name -> hashlib style constructor (update/digest)
HASH_FUNCTIONS: dict[str, Callable] = {
    "sha256": hashlib.sha256,
    "sha3-256": hashlib.sha3_256,
    "sha512": hashlib.sha512,
    "blake2b-224": partial(hashlib.blake2b, digest_size=28),
    "blake2b-256": partial(hashlib.blake2b, digest_size=32),
}


def get_hash(name: str) -> Callable:
    """
    Look up a hash constructor by its agreed name.

    Args:
        name: A key of `HASH_FUNCTIONS`, e.g. "sha256".

    Returns:
        A zero-argument constructor returning a fresh hash state.

    Raises:
        ValueError: If the name is not registered.
    """
    try:
        return HASH_FUNCTIONS[name]
    except KeyError:
        raise ValueError(
            f"Unknown hash function {name!r}, expected one of {sorted(HASH_FUNCTIONS)}"
        ) from None


def chain_digest(solutions: Iterable[str], hash_fn: Callable) -> bytes:
    """
    Feed every solution, in order, into one running hash state.

    This is a single digest over the concatenation s1 || s2 || ... || sn,
    not a hash of hashes. Strings are UTF-8 encoded.

    Args:
        solutions: Ordered solution strings.
        hash_fn: Hash constructor from `get_hash`.

    Returns:
        The raw digest bytes.
    """
    state = hash_fn()
    for solution in solutions:
        state.update(solution.encode("utf-8"))
    return state.digest()


def to_int(digest: bytes, modulus: int) -> int:
    """
    Interpret a digest as a big-endian integer reduced modulo `modulus`.
    """
    return int.from_bytes(digest, "big") % modulus


def from_int(integer: int, length: int) -> bytes:
    """
    Encode a non-negative integer as a fixed-length big-endian byte string.

    Raises:
        OverflowError: If the integer does not fit in `length` bytes.
    """
    return integer.to_bytes(length, "big")

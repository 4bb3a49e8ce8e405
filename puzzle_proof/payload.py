# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# puzzle_proof/payload.py

import cbor2

from puzzle_proof.constants import PROOF_FORMAT_VERSION
from puzzle_proof.encoding import decode_point, decode_scalar, encode_point, encode_scalar
from puzzle_proof.errors import SerializationError
from puzzle_proof.parameters import DEFAULT_PARAMETERS, Parameters
from puzzle_proof.schnorr import Proof


def dump_proof(proof: Proof, params: Parameters = DEFAULT_PARAMETERS) -> bytes:
    """
    Build a canonical CBOR encoding of a proof.

    The map layout is:
        { 0 => uint,    ; format version
          1 => tstr,    ; group name
          2 => tstr,    ; hash name
          3 => bstr,    ; A.x
          4 => bstr,    ; A.y
          5 => bstr }   ; z

    Uses canonical CBOR encoding (RFC 8949 §4.2) so the same proof always
    encodes to the same bytes.

    Raises:
        SerializationError: If `A` is the identity.
    """
    group = params.group
    a_x, a_y = encode_point(group, proof.a)
    m = {
        0: PROOF_FORMAT_VERSION,
        1: group.name,
        2: params.hash_name,
        3: a_x,
        4: a_y,
        5: encode_scalar(group, proof.z),
    }
    return cbor2.dumps(m, canonical=True)


def load_proof(data: bytes, params: Parameters = DEFAULT_PARAMETERS) -> Proof:
    """
    Parse a CBOR-encoded proof produced by `dump_proof`.

    Raises:
        SerializationError: If the CBOR structure does not match the layout,
            the proof was made for other parameters, or a field does not
            decode to a valid point or scalar.
    """
    try:
        m = cbor2.loads(data)
    except cbor2.CBORDecodeError as e:
        raise SerializationError(f"Invalid CBOR: {e}") from None
    if not isinstance(m, dict):
        raise SerializationError(f"Expected CBOR map, got {type(m).__name__}")
    if set(m) != {0, 1, 2, 3, 4, 5}:
        raise SerializationError(f"Expected keys 0..5, got {sorted(m, key=str)}")
    if m[0] != PROOF_FORMAT_VERSION:
        raise SerializationError(f"Unsupported proof format version {m[0]!r}")
    if m[1] != params.group.name:
        raise SerializationError(
            f"Proof is for group {m[1]!r}, expected {params.group.name!r}"
        )
    if m[2] != params.hash_name:
        raise SerializationError(
            f"Proof is for hash {m[2]!r}, expected {params.hash_name!r}"
        )
    for k in (3, 4, 5):
        if not isinstance(m[k], bytes):
            raise SerializationError(
                f"Field {k} must be bytes, got {type(m[k]).__name__}"
            )
    a = decode_point(params.group, m[3], m[4])
    return Proof(a, decode_scalar(params.group, m[5]))

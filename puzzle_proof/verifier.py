# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import logging
from typing import Any, NamedTuple

from puzzle_proof.curves import Point
from puzzle_proof.encoding import decode_point, decode_scalar, encode_point, encode_scalar
from puzzle_proof.errors import InvalidProof, SerializationError
from puzzle_proof.fiat_shamir import challenge
from puzzle_proof.parameters import DEFAULT_PARAMETERS, Parameters
from puzzle_proof.schnorr import Proof, fiat_shamir_heuristic

logger = logging.getLogger(__name__)


class ProofExport(NamedTuple):
    """
    Canonical bytes of every value in the verification equation
    `[z]g == A + [e]W`, in the order an external verifier expects.
    """

    a_x: bytes
    a_y: bytes
    g_x: bytes
    g_y: bytes
    w_x: bytes
    w_y: bytes
    z: bytes

    def to_json(self) -> dict[str, Any]:
        return {
            "constructor": 0,
            "fields": [{"bytes": value.hex()} for value in self],
        }


def _check(proof: Proof, commitment: Point, message: bytes | None, params: Parameters) -> bool:
    group = params.group
    g = params.generator

    if not isinstance(proof.z, int) or not 0 <= proof.z < group.order:
        logger.debug("[VERIFY] Response scalar out of range")
        return False
    if not group.is_on_curve(commitment) or not group.is_on_curve(proof.a):
        logger.debug("[VERIFY] Point is not on the curve")
        return False
    if not group.in_subgroup(proof.a) or not group.in_subgroup(commitment):
        logger.debug("[VERIFY] Point is outside the prime-order subgroup")
        return False
    if message is not None and not message:
        logger.debug("[VERIFY] Bound message is empty")
        return False

    try:
        e = fiat_shamir_heuristic(g, commitment, proof.a, message, params)
    except SerializationError as err:
        logger.debug(f"[VERIFY] Transcript could not be encoded: {err}")
        return False

    lhs = group.multiply(g, proof.z)
    rhs = group.add(proof.a, group.multiply(commitment, e))
    return group.eq(lhs, rhs)


def verify(
    proof: Proof,
    commitment: Point,
    message: bytes | None = None,
    params: Parameters = DEFAULT_PARAMETERS,
) -> bool:
    """
    Check a Schnorr proof against a published commitment.

    Recomputes `e = H(g || W || A [|| message])` and checks

        [z]g == A + [e]W

    Args:
        proof: The proof `(A, z)`.
        commitment: The published commitment `W`.
        message: The message the proof must be bound to, if any. An empty
            message is never valid.
        params: Agreed group, hash and generator.

    Returns:
        bool: True if the proof is valid. Malformed proofs return False,
        this function does not raise on a failed check.
    """
    valid = _check(proof, commitment, message, params)
    logger.debug(f"[VERIFY] Proof valid: {valid}")
    return valid


def verify_and_export(
    proof: Proof,
    commitment: Point,
    message: bytes | None = None,
    params: Parameters = DEFAULT_PARAMETERS,
) -> ProofExport:
    """
    Verify a proof and export the canonical bytes of the verification equation.

    The export is meant for a second, independently written verifier
    (for example a smart contract) and has the layout

        (A.x, A.y, g.x, g.y, W.x, W.y, z)

    with every coordinate `group.coordinate_size` bytes and `z`
    `group.scalar_size` bytes, all big-endian.

    Raises:
        InvalidProof: If the proof does not verify. Nothing is encoded in
            that case.
    """
    if not _check(proof, commitment, message, params):
        logger.debug("[VERIFY] Refusing to export an invalid proof")
        raise InvalidProof("Invalid proof")

    group = params.group
    a_x, a_y = encode_point(group, proof.a)
    g_x, g_y = encode_point(group, params.generator)
    w_x, w_y = encode_point(group, commitment)
    return ProofExport(a_x, a_y, g_x, g_y, w_x, w_y, encode_scalar(group, proof.z))


def verify_exported(
    export: ProofExport,
    message: bytes | None = None,
    params: Parameters = DEFAULT_PARAMETERS,
) -> bool:
    """
    Re-check an exported proof from its bytes alone.

    This mirrors what an external verifier does: decode and validate every
    point, recompute the challenge over `(g, W, A)` and check the equation.
    It shares no state with the prover and requires the exported generator
    to be the agreed one.

    Returns:
        bool: True if the exported proof is valid; malformed bytes give False.
    """
    group = params.group
    try:
        a = decode_point(group, export.a_x, export.a_y)
        g = decode_point(group, export.g_x, export.g_y)
        w = decode_point(group, export.w_x, export.w_y)
        z = decode_scalar(group, export.z)
    except SerializationError as err:
        logger.debug(f"[VERIFY] Export could not be decoded: {err}")
        return False

    if not group.eq(g, params.generator):
        logger.debug("[VERIFY] Export uses a different generator")
        return False
    if message is not None and not message:
        logger.debug("[VERIFY] Bound message is empty")
        return False

    e = challenge(group, (g, w, a), params.hash_fn, message)
    return group.eq(group.multiply(g, z), group.add(a, group.multiply(w, e)))

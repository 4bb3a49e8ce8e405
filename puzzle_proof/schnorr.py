# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from puzzle_proof.curves import Point, random_scalar
from puzzle_proof.encoding import encode_scalar
from puzzle_proof.errors import InvalidSolution
from puzzle_proof.fiat_shamir import challenge
from puzzle_proof.files import constructor_fields, load_json, save_json
from puzzle_proof.parameters import DEFAULT_PARAMETERS, Parameters

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Proof:
    """
    A non-interactive Schnorr proof.

    Attributes:
        a: Blinding commitment `[r]g`.
        z: Response scalar `r + e*w mod q`.
    """

    a: Point
    z: int


def fiat_shamir_heuristic(
    g: Point,
    commitment: Point,
    a: Point,
    message: bytes | None = None,
    params: Parameters = DEFAULT_PARAMETERS,
) -> int:
    """
    Compute the Fiat–Shamir challenge for the Schnorr proof.

    The challenge is derived from the transcript

        g || W || A [|| message]

    where every point contributes its canonical x and y coordinates:
    - `g` is the public generator,
    - `W` is the published commitment,
    - `A` is the blinding commitment `[r]g`,
    - `message` is the optional external message the proof is bound to.

    Folding the message into the transcript ties the proof to it, so the
    same proof does not verify for any other message.

    Returns:
        The challenge scalar `e`.

    Raises:
        SerializationError: If any point is the identity.
    """
    return challenge(params.group, (g, commitment, a), params.hash_fn, message)


def prove(
    w: int,
    commitment: Point,
    message: bytes | None = None,
    params: Parameters = DEFAULT_PARAMETERS,
    rng: Any = None,
) -> Proof:
    """
    Generate a non-interactive Schnorr proof of knowledge of `w` for `W = [w]g`.

    This implements the Fiat–Shamir transform over a standard Schnorr protocol:

    Commit:
        r  <-$ Z_q
        A  = [r]g

    Challenge:
        e = H(g || W || A [|| message]) mod q

    Response:
        z = w*e + r mod q

    The verifier checks that:
        [z]g == A + [e]W

    Args:
        w: The secret scalar.
        commitment: The claimed commitment `W`.
        message: Optional bytes to bind the proof to (e.g. the solver's address).
            Use None, not `b""`, for an unbound proof.
        params: Agreed group, hash and generator.
        rng: Source of the blinding scalar, any object with
            `randrange(start, stop)`. Defaults to `secrets.SystemRandom`.
            A fresh, unpredictable `r` per proof is mandatory: two proofs
            sharing `r` reveal `w`.

    Returns:
        The proof `(A, z)`.

    Raises:
        InvalidSolution: If `[w]g != W`.
        ValueError: If `message` is empty.
    """
    group = params.group
    g = params.generator
    if not group.eq(group.multiply(g, w), commitment):
        raise InvalidSolution("Invalid solution: w does not open the commitment")

    r = random_scalar(group, rng)
    a = group.multiply(g, r)
    e = fiat_shamir_heuristic(g, commitment, a, message, params)
    z = (w * e + r) % group.order
    logger.debug(
        f"[PROVE] Generated proof for commitment {group.to_hex(commitment)} "
        f"with blinding commitment {group.to_hex(a)}"
    )
    return Proof(a, z)


def schnorr_to_file(
    proof: Proof, path: str | Path, params: Parameters = DEFAULT_PARAMETERS
) -> None:
    """
    Serialize a Schnorr proof `(z, A)` to a JSON file.

    The output schema is the constructor encoding used by every artifact:
        {
          "constructor": 0,
          "fields": [
            {"bytes": z},
            {"bytes": A}
          ]
        }

    `z` is written as fixed-length big-endian hex, `A` with `Group.to_hex`.

    Raises:
        SerializationError: If `A` is the identity.
    """
    group = params.group
    data = {
        "constructor": 0,
        "fields": [
            {"bytes": encode_scalar(group, proof.z).hex()},
            {"bytes": group.to_hex(proof.a)},
        ],
    }
    save_json(path, data)
    logger.debug(f"[PROVE] Wrote proof to {path}")


def schnorr_from_file(
    path: str | Path, params: Parameters = DEFAULT_PARAMETERS
) -> Proof:
    """
    Load a proof written by `schnorr_to_file`.

    Raises:
        ValueError: If the artifact is malformed (including
            `SerializationError` for bad points).
    """
    z_hex, a_hex = constructor_fields(load_json(path), 2)
    return Proof(params.group.from_hex(a_hex), int(z_hex, 16))

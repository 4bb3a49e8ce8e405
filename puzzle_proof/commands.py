# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import logging
from pathlib import Path
from typing import Any, Sequence

from puzzle_proof.commitment import Commitment, PuzzleSolution
from puzzle_proof.constants import (
    COMMITMENT_FILE,
    EXPORT_FILE,
    PROOF_CBOR_FILE,
    PROOF_FILE,
)
from puzzle_proof.errors import InvalidProof
from puzzle_proof.files import save_bytes, save_json
from puzzle_proof.parameters import DEFAULT_PARAMETERS, Parameters
from puzzle_proof.payload import dump_proof
from puzzle_proof.schnorr import schnorr_from_file, schnorr_to_file
from puzzle_proof.verifier import verify, verify_and_export

logger = logging.getLogger(__name__)


def publish_commitment(
    solutions: Sequence[str],
    out_dir: str | Path,
    params: Parameters = DEFAULT_PARAMETERS,
) -> Commitment:
    """
    Commit to a solution set and publish the public commitment.

    Side effects (writes files):
    - `out_dir/commitment.json` with the generator and the commitment point.

    Args:
        solutions: Ordered solution strings.
        out_dir: Directory receiving the artifact.
        params: Agreed group, hash and generator.

    Returns:
        The commitment, with its secret scalar, for the solver to keep.
    """
    commitment = PuzzleSolution(list(solutions), params).commitment()
    commitment.to_file(Path(out_dir) / COMMITMENT_FILE)
    logger.info(f"[COMMIT] Published commitment {commitment.to_hex()}")
    return commitment


def create_proof(
    solutions: Sequence[str],
    out_dir: str | Path,
    message: bytes | None = None,
    params: Parameters = DEFAULT_PARAMETERS,
    rng: Any = None,
) -> None:
    """
    Prove knowledge of the solutions behind the published commitment.

    High-level steps:
    1. Load `out_dir/commitment.json` (public data only).
    2. Re-derive `w` from the solutions and prove it opens the commitment,
       optionally bound to `message`.
    3. Write the proof as `proof.json` (constructor layout) and
       `proof.cbor` (canonical CBOR).

    Raises:
        InvalidSolution: If the solutions do not open the published commitment.
    """
    out_dir = Path(out_dir)
    commitment = Commitment.from_file(out_dir / COMMITMENT_FILE, params)
    proof = PuzzleSolution(list(solutions), params).prove(commitment, message, rng)
    schnorr_to_file(proof, out_dir / PROOF_FILE, params)
    save_bytes(out_dir / PROOF_CBOR_FILE, dump_proof(proof, params))
    logger.info(f"[PROVE] Wrote proof for commitment {commitment.to_hex()}")


def check_proof(
    out_dir: str | Path,
    message: bytes | None = None,
    params: Parameters = DEFAULT_PARAMETERS,
    export: bool = False,
) -> bool:
    """
    Verify the published proof against the published commitment.

    When `export` is set and the proof is valid, the canonical export tuple
    is written to `out_dir/export.json` for an external verifier. An invalid
    proof never produces an export file.

    Returns:
        bool: Whether the proof verified.
    """
    out_dir = Path(out_dir)
    commitment = Commitment.from_file(out_dir / COMMITMENT_FILE, params)
    proof = schnorr_from_file(out_dir / PROOF_FILE, params)

    if not export:
        return verify(proof, commitment.point, message, params)

    try:
        exported = verify_and_export(proof, commitment.point, message, params)
    except InvalidProof:
        logger.warning(f"[VERIFY] Proof rejected for commitment {commitment.to_hex()}")
        return False
    save_json(out_dir / EXPORT_FILE, exported.to_json())
    logger.info(f"[VERIFY] Exported proof for commitment {commitment.to_hex()}")
    return True

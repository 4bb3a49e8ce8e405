# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Sequence

from puzzle_proof.curves import Point
from puzzle_proof.files import constructor_fields, load_json, save_json
from puzzle_proof.hashing import chain_digest, to_int
from puzzle_proof.parameters import DEFAULT_PARAMETERS, Parameters
from puzzle_proof.schnorr import Proof, prove

logger = logging.getLogger(__name__)


def commit(
    solutions: Sequence[str], params: Parameters = DEFAULT_PARAMETERS
) -> tuple[int, Point]:
    """
    Derive the secret scalar and the public commitment for a solution set.

    All solutions are fed, in order, into one running hash state:

        d = H(s1 || s2 || ... || sn)
        w = int(d) mod r
        W = [w]g

    Order matters: permuting the solutions changes `w` and `W`.

    Args:
        solutions: Ordered, non-empty sequence of solution strings.
        params: Agreed group, hash and generator.

    Returns:
        A tuple `(w, W)` of the secret scalar and the commitment point.

    Raises:
        ValueError: If the solution set is empty.
    """
    if len(solutions) == 0:
        raise ValueError("solution set must not be empty")
    digest = chain_digest(solutions, params.hash_fn)
    w = to_int(digest, params.group.order)
    return w, params.group.multiply(params.generator, w)


@dataclass
class Commitment:
    w: int | None = field(default=None, repr=False)
    point: Point | None = None
    params: Parameters = DEFAULT_PARAMETERS

    def __post_init__(self):
        # Secret-known construction
        if self.w is not None:
            self.point = self.params.group.multiply(self.params.generator, self.w)
            return

        # Public-only construction
        if self.point is None:
            raise ValueError("Must provide the commitment point if w is not known")

    def __eq__(self, other):
        if not isinstance(other, Commitment):
            return NotImplemented
        return self.params.group is other.params.group and self.params.group.eq(
            self.point, other.point
        )

    @classmethod
    def from_public(
        cls, point: Point, params: Parameters = DEFAULT_PARAMETERS
    ) -> "Commitment":
        return cls(w=None, point=point, params=params)

    @classmethod
    def from_hex(
        cls, element: str, params: Parameters = DEFAULT_PARAMETERS
    ) -> "Commitment":
        return cls.from_public(params.group.from_hex(element), params)

    def to_hex(self) -> str:
        return self.params.group.to_hex(self.point)

    def to_json(self) -> dict[str, Any]:
        group = self.params.group
        return {
            "constructor": 0,
            "fields": [
                {"bytes": group.to_hex(self.params.generator)},
                {"bytes": group.to_hex(self.point)},
            ],
        }

    def to_file(self, path: str | Path) -> None:
        """
        Publish the commitment as a JSON artifact. The secret is never written.
        """
        save_json(path, self.to_json())
        logger.debug(f"[COMMIT] Wrote commitment {self.to_hex()} to {path}")

    @classmethod
    def from_file(
        cls, path: str | Path, params: Parameters = DEFAULT_PARAMETERS
    ) -> "Commitment":
        """
        Load a published commitment.

        Raises:
            ValueError: If the artifact is malformed or was made with a
                different generator.
        """
        g_hex, w_hex = constructor_fields(load_json(path), 2)
        group = params.group
        if not group.eq(group.from_hex(g_hex), params.generator):
            raise ValueError("commitment was published for a different generator")
        return cls.from_hex(w_hex, params)


@dataclass
class PuzzleSolution:
    """
    An ordered set of puzzle solutions held by the solver.
    """

    solutions: list[str] = field(repr=False)
    params: Parameters = DEFAULT_PARAMETERS

    def commitment(self) -> Commitment:
        w, _ = commit(self.solutions, self.params)
        return Commitment(w=w, params=self.params)

    def prove(
        self, commitment: Commitment, message: bytes | None = None, rng: Any = None
    ) -> Proof:
        """
        Prove knowledge of the solutions behind a published commitment.

        Raises:
            InvalidSolution: If these solutions do not open `commitment`.
        """
        w, _ = commit(self.solutions, self.params)
        return prove(w, commitment.point, message, params=self.params, rng=rng)

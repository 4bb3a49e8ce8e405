# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
from dataclasses import dataclass
from typing import Callable

from puzzle_proof.constants import DEFAULT_GROUP, DEFAULT_HASH
from puzzle_proof.curves import BN254, Group, Point, get_group
from puzzle_proof.hashing import get_hash


@dataclass(frozen=True)
class Parameters:
    """
    The public agreement shared by prover and verifier.

    Attributes:
        group: The prime-order group every point lives in.
        hash_name: Name of the digest used for both the commitment chain
            and the Fiat-Shamir challenge.
        generator: The fixed public generator g. Defaults to the group's
            standard generator.
    """

    group: Group = BN254
    hash_name: str = DEFAULT_HASH
    generator: Point | None = None

    def __post_init__(self):
        # fail early on an unknown hash
        get_hash(self.hash_name)

        if self.generator is None:
            object.__setattr__(self, "generator", self.group.generator)
            return

        if (
            self.group.is_identity(self.generator)
            or not self.group.is_on_curve(self.generator)
            or not self.group.in_subgroup(self.generator)
        ):
            raise ValueError(f"generator is not a valid {self.group.name} point")

    @property
    def hash_fn(self) -> Callable:
        return get_hash(self.hash_name)

    @classmethod
    def from_names(
        cls, group: str = DEFAULT_GROUP, hash_name: str = DEFAULT_HASH
    ) -> "Parameters":
        return cls(group=get_group(group), hash_name=hash_name)


DEFAULT_PARAMETERS = Parameters()

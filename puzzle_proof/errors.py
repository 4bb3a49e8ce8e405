# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only


class PuzzleProofError(ValueError):
    """Base class for every failure reported by puzzle_proof."""


class InvalidSolution(PuzzleProofError):
    """The secret scalar does not open the claimed commitment."""


class InvalidProof(PuzzleProofError):
    """The verification equation does not hold."""


class SerializationError(PuzzleProofError):
    """A point or scalar has no valid canonical encoding."""

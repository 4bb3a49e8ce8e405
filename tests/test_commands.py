# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import random

import pytest

from puzzle_proof.commands import check_proof, create_proof, publish_commitment
from puzzle_proof.errors import InvalidSolution
from puzzle_proof.files import load_json
from puzzle_proof.parameters import Parameters
from puzzle_proof.payload import load_proof
from puzzle_proof.verifier import ProofExport, verify_exported

SOLUTIONS = ["solution1", "solution2", "solution3"]


def test_publish_prove_verify(tmp_path):
    commitment = publish_commitment(SOLUTIONS, tmp_path)
    assert (tmp_path / "commitment.json").exists()

    create_proof(SOLUTIONS, tmp_path, b"0xalice", rng=random.Random(3))
    assert (tmp_path / "proof.json").exists()
    assert load_proof((tmp_path / "proof.cbor").read_bytes()) is not None

    assert check_proof(tmp_path, b"0xalice")
    assert not check_proof(tmp_path, b"0xbob")
    assert commitment.w is not None


def test_export_file(tmp_path):
    params = Parameters.from_names("bls12-381", "sha256")
    publish_commitment(SOLUTIONS, tmp_path, params)
    create_proof(SOLUTIONS, tmp_path, params=params)

    assert check_proof(tmp_path, params=params, export=True)
    fields = load_json(tmp_path / "export.json")["fields"]
    exported = ProofExport(*(bytes.fromhex(f["bytes"]) for f in fields))
    assert verify_exported(exported, params=params)


def test_invalid_proof_writes_no_export(tmp_path):
    publish_commitment(SOLUTIONS, tmp_path)
    create_proof(SOLUTIONS, tmp_path, b"0xalice")

    assert not check_proof(tmp_path, b"0xbob", export=True)
    assert not (tmp_path / "export.json").exists()


def test_wrong_solutions_cannot_prove(tmp_path):
    publish_commitment(SOLUTIONS, tmp_path)
    with pytest.raises(InvalidSolution):
        create_proof(["Solution1", "solution2", "solution3"], tmp_path)
    assert not (tmp_path / "proof.json").exists()


if __name__ == "__main__":
    pytest.main()

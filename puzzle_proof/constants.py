# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# agreed defaults, both sides must use the same values
DEFAULT_GROUP = "bn254"
DEFAULT_HASH = "sha256"

# proof wire format
PROOF_FORMAT_VERSION = 1

# artifact file names
COMMITMENT_FILE = "commitment.json"
PROOF_FILE = "proof.json"
PROOF_CBOR_FILE = "proof.cbor"
EXPORT_FILE = "export.json"

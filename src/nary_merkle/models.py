# models.py
# Data contracts for authentication paths.
# No business logic lives here: pure schema. Structural checks against the
# arity belong to proof.verify(), which reports them as MalformedProof.

from pydantic import BaseModel, ConfigDict, Field


class ProofStep(BaseModel):
    """One row of an authentication path."""

    model_config = ConfigDict(frozen=True, ser_json_bytes="hex", val_json_bytes="hex")

    siblings: tuple[bytes, ...] = Field(..., description="The arity-1 sibling digests, left to right.")
    position: int = Field(..., description="Slot of the proven node within its sibling group.")


class MerkleProof(BaseModel):
    """Authentication path for a single leaf, ordered from the leaf row upward."""

    model_config = ConfigDict(frozen=True, ser_json_bytes="hex", val_json_bytes="hex")

    leaf_index: int = Field(..., ge=0)
    arity: int
    steps: tuple[ProofStep, ...] = Field(default_factory=tuple)

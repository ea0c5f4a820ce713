# proof.py
# Authentication path extraction and membership verification.
#
# A proof records, for every row between a leaf and the root, the
# arity-1 sibling digests of the current node and the node's slot in
# its sibling group. The verifier re-inserts the running digest at that
# slot, hashes the group and climbs until it reaches an implied root.

import logging
from typing import Any

from nary_merkle.digests import DigestFn, leaf_bytes, sha256
from nary_merkle.errors import IndexOutOfRange, MalformedProof
from nary_merkle.merkle import MerkleTree
from nary_merkle.models import MerkleProof, ProofStep

logger = logging.getLogger(__name__)


def extract_path(tree: MerkleTree, leaf_index: int) -> MerkleProof:
    """
    Build the authentication path for leaf `leaf_index`.

    Raises IndexOutOfRange unless 0 <= leaf_index < tree.leafs.
    A single-leaf tree yields a proof with no steps.
    """
    if leaf_index < 0 or leaf_index >= tree.leafs:
        raise IndexOutOfRange(leaf_index, tree.leafs, what="leaf")

    steps: list[ProofStep] = []
    current = leaf_index
    root = tree.len - 1
    while current != root:
        parent = tree.parent(current)
        group = tree.children(parent)
        steps.append(
            ProofStep(
                siblings=tuple(tree.digest_at(i) for i in group if i != current),
                position=group.index(current),
            )
        )
        current = parent

    logger.debug("Extracted path for leaf %d: %d step(s)", leaf_index, len(steps))
    return MerkleProof(leaf_index=leaf_index, arity=tree.arity, steps=tuple(steps))


def _check_step(number: int, step: ProofStep, arity: int) -> None:
    if len(step.siblings) != arity - 1:
        raise MalformedProof(
            number, f"expected {arity - 1} sibling digest(s), got {len(step.siblings)}."
        )
    if step.position < 0 or step.position >= arity:
        raise MalformedProof(number, f"position {step.position} outside [0, {arity}).")


def implied_root(leaf_data: Any, proof: MerkleProof, digest: DigestFn = sha256) -> bytes:
    """Root digest implied by `leaf_data` and `proof`. Raises MalformedProof."""
    if proof.arity < 2:
        raise MalformedProof(0, f"arity must be at least 2, got {proof.arity}.")

    current = digest(leaf_bytes(leaf_data))
    index = 0
    for number, step in enumerate(proof.steps):
        _check_step(number, step, proof.arity)
        index += step.position * proof.arity ** number
        group = list(step.siblings)
        group.insert(step.position, current)
        current = digest(b"".join(group))

    # Positions spell out the leaf index in base `arity`, least significant first.
    if index != proof.leaf_index:
        raise MalformedProof(
            max(len(proof.steps) - 1, 0),
            f"leaf_index {proof.leaf_index} inconsistent with positions (they encode leaf {index}).",
        )
    return current


def verify(leaf_data: Any, proof: MerkleProof, expected_root: bytes, digest: DigestFn = sha256) -> bool:
    """
    Check that `leaf_data` is a member of the tree whose root is `expected_root`.

    Returns False on any digest mismatch. Raises MalformedProof only when
    the proof's shape contradicts its arity or its positions disagree with
    its leaf_index; callers must treat that as a failed verification, not
    retry it.
    """
    ok = implied_root(leaf_data, proof, digest) == bytes(expected_root)
    logger.debug("Verify leaf %d against root %s: %s", proof.leaf_index, bytes(expected_root).hex(), ok)
    return ok

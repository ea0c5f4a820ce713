# errors.py
# Error taxonomy for tree construction, navigation and proof checking.
#
# A failed membership check is NOT an error: verify() returns False.
# Everything here signals caller misuse or a structurally broken proof.


class MerkleError(Exception):
    """Base class for every error raised by nary_merkle."""


class InvalidLayout(MerkleError):
    """Leaf count cannot be reduced to a single root by exact division."""

    def __init__(self, leafs: int, arity: int, row: int | None = None, remainder: int | None = None) -> None:
        self.leafs = leafs
        self.arity = arity
        self.row = row
        self.remainder = remainder
        if arity < 2:
            msg = f"Arity must be at least 2, got {arity}."
        elif leafs < 1:
            msg = f"Cannot build a Merkle tree from {leafs} leaves."
        else:
            msg = (
                f"{leafs} leaves do not reduce to a single root with arity {arity}: "
                f"row {row} holds {remainder} node(s) left over after grouping by {arity}."
            )
        super().__init__(msg)


class IndexOutOfRange(MerkleError, IndexError):
    """Node or leaf index outside [0, bound)."""

    def __init__(self, index: int, bound: int, what: str = "node") -> None:
        self.index = index
        self.bound = bound
        super().__init__(f"{what.capitalize()} index {index} is out of range [0, {bound}).")


class NoChildren(MerkleError):
    """children() asked of a leaf."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Node {index} is a leaf and has no children.")


class NoParent(MerkleError):
    """parent() asked of the root."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Node {index} is the root and has no parent.")


class MalformedProof(MerkleError):
    """Proof structure is inconsistent with its arity. Treat as a failed verification."""

    def __init__(self, step: int, reason: str) -> None:
        self.step = step
        self.reason = reason
        super().__init__(f"Malformed proof at step {step}: {reason}")


class UnknownDigest(MerkleError, ValueError):
    """Digest name absent from the registry."""

    def __init__(self, name: str, known: list[str]) -> None:
        self.name = name
        super().__init__(f"Unknown digest {name!r}. Known digests: {', '.join(known)}.")

# merkle.py
# Fixed-arity Merkle tree over a flat, index-addressed digest array.
#
# Leaf  = digest(leaf_bytes(record))
# Node  = digest(child_0 + child_1 + ... + child_{arity-1})   (index order)
# Root  = node len - 1
#
# The tree is built once, bottom-up, and never mutated afterwards.
# Construction either completes or raises; no partial tree escapes.

import logging
from typing import Any, Iterator, Sequence

from nary_merkle.digests import DigestFn, leaf_bytes, sha256
from nary_merkle.errors import IndexOutOfRange, NoChildren, NoParent
from nary_merkle.layout import Layout, compute_layout

logger = logging.getLogger(__name__)


class MerkleTree:
    """
    Merkle tree with `arity` children per internal node.

    Example:
        tree = MerkleTree([b"a", b"b", b"c", b"d"], arity=2, digest=md5)
        tree.root            # 16-byte MD5 digest
        tree.children(6)     # (4, 5)
        tree.parent(0)       # 4

    The leaf count must divide by `arity` at every row until a single
    root remains; anything else raises InvalidLayout before hashing.
    """

    def __init__(self, leaves: Sequence[Any], arity: int = 2, digest: DigestFn = sha256) -> None:
        self._layout: Layout = compute_layout(len(leaves), arity)
        self._digest = digest
        self._nodes: tuple[bytes, ...] = self._build(leaves)
        logger.debug(
            "Built tree: leafs=%d arity=%d len=%d root=%s",
            self.leafs, self.arity, self.len, self.root.hex(),
        )

    # ------------------------------------------------------------------
    # Tree construction
    # ------------------------------------------------------------------

    def _build(self, leaves: Sequence[Any]) -> tuple[bytes, ...]:
        layout = self._layout
        nodes: list[bytes] = [b""] * layout.len

        for index, record in enumerate(leaves):
            nodes[index] = self._digest(leaf_bytes(record))

        for row in range(1, layout.row_count):
            start = layout.row_starts[row]
            prev_start = layout.row_starts[row - 1]
            for index in range(start, start + layout.row_widths[row]):
                first = (index - start) * layout.arity + prev_start
                nodes[index] = self._digest(b"".join(nodes[first:first + layout.arity]))

        return tuple(nodes)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _check(self, index: int) -> None:
        if index < 0 or index >= self.len:
            raise IndexOutOfRange(index, self.len)

    def digest_at(self, index: int) -> bytes:
        """Stored digest of node `index`."""
        self._check(index)
        return self._nodes[index]

    def __getitem__(self, index: int) -> bytes:
        return self.digest_at(index)

    def row_of(self, index: int) -> int:
        self._check(index)
        return self._layout.row_of(index)

    def children(self, index: int) -> tuple[int, ...]:
        """Ordered child indices of an internal node. Raises NoChildren for a leaf."""
        self._check(index)
        if index < self.leafs:
            raise NoChildren(index)
        layout = self._layout
        row = layout.row_of(index)
        first = (index - layout.row_starts[row]) * self.arity + layout.row_starts[row - 1]
        return tuple(range(first, first + self.arity))

    def parent(self, index: int) -> int:
        """Index of the single parent. Raises NoParent for the root."""
        self._check(index)
        if index == self.len - 1:
            raise NoParent(index)
        layout = self._layout
        row = layout.row_of(index)
        return layout.row_starts[row + 1] + (index - layout.row_starts[row]) // self.arity

    def hash_path(self, index: int) -> list[bytes]:
        """
        Digest of `index` followed by the digest of every ancestor up to the root.

        This is a navigation aid, not a membership proof: use
        proof.extract_path() for something a verifier can check.
        """
        path = [self.digest_at(index)]
        current = index
        while current != self.len - 1:
            current = self.parent(current)
            path.append(self._nodes[current])
        return path

    def nodes(self) -> Iterator[tuple[int, bytes, tuple[int, ...] | None]]:
        """Yield (index, digest, children or None for leaves) in index order."""
        for index, node in enumerate(self._nodes):
            yield index, node, (self.children(index) if index >= self.leafs else None)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def root(self) -> bytes:
        """Digest of the root node, index len - 1."""
        return self._nodes[-1]

    @property
    def leaves(self) -> tuple[bytes, ...]:
        """Leaf digests in input order."""
        return self._nodes[:self.leafs]

    @property
    def digest(self) -> DigestFn:
        return self._digest

    @property
    def digest_size(self) -> int:
        return len(self.root)

    @property
    def layout(self) -> Layout:
        return self._layout

    @property
    def leafs(self) -> int:
        return self._layout.leafs

    @property
    def arity(self) -> int:
        return self._layout.arity

    @property
    def len(self) -> int:
        return self._layout.len

    @property
    def row_count(self) -> int:
        return self._layout.row_count

    def __len__(self) -> int:
        return self._layout.len

    def __repr__(self) -> str:
        return (
            f"MerkleTree(leafs={self.leafs}, arity={self.arity}, "
            f"len={self.len}, root={self.root.hex()})"
        )


def build(leaves: Sequence[Any], arity: int = 2, digest: DigestFn = sha256) -> MerkleTree:
    """Build a tree over `leaves`. Raises InvalidLayout for a non-conforming leaf count."""
    return MerkleTree(leaves, arity=arity, digest=digest)

# run.py
# Entry point. Config and wiring only: no logic lives here.
#
# Builds a tree over the leaves given on the command line (or the demo
# leaves), then extracts and verifies a proof for every leaf.
#
# Configuration comes from the environment (a .env file is honoured):
#   MERKLE_DIGEST     registered digest name            (default: sha256)
#   MERKLE_ARITY      children per internal node        (default: 2)
#   MERKLE_LOG_LEVEL  library log level                 (default: WARNING)

import logging
import os
import sys

from dotenv import load_dotenv
from rich.logging import RichHandler

from nary_merkle import display
from nary_merkle.digests import get_digest
from nary_merkle.errors import MerkleError
from nary_merkle.merkle import MerkleTree
from nary_merkle.proof import extract_path, verify

DEMO_LEAVES = ["0", "1", "2", "3", "4", "5", "6", "7"]


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=display.console, rich_tracebacks=True)],
    )


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    digest_name = os.getenv("MERKLE_DIGEST", "sha256")

    leaves = list(sys.argv[1:] if argv is None else argv) or DEMO_LEAVES

    try:
        _configure_logging(os.getenv("MERKLE_LOG_LEVEL", "WARNING"))
        arity = int(os.getenv("MERKLE_ARITY", "2"))
        digest = get_digest(digest_name)
        display.banner(digest_name, arity, len(leaves))
        tree = MerkleTree(leaves, arity=arity, digest=digest)
    except (MerkleError, ValueError) as exc:
        display.halt(str(exc))
        return 1

    display.tree_committed(tree)

    verified = 0
    for index, leaf in enumerate(leaves):
        proof = extract_path(tree, index)
        display.proof_extracted(proof)
        ok = verify(leaf, proof, tree.root, digest=digest)
        display.verification_result(index, ok)
        verified += ok

    display.summary(verified, len(leaves))
    return 0 if verified == len(leaves) else 1


if __name__ == "__main__":
    sys.exit(main())

from unittest.mock import patch

import pytest
from rich.console import Console

from nary_merkle import display
from nary_merkle.merkle import MerkleTree
from nary_merkle.proof import extract_path


@pytest.fixture
def recorder():
    console = Console(record=True, width=200, color_system=None)
    with patch.object(display, "console", console):
        yield console


def test_tree_committed_lists_root_and_every_node(recorder):
    tree = MerkleTree([b"a", b"b", b"c", b"d"], arity=2)
    display.tree_committed(tree)
    text = recorder.export_text()
    assert tree.root.hex() in text
    assert "leaf" in text
    assert "4, 5" in text
    assert "len=7 rows=3 digest_size=32" in text


def test_proof_extracted_shows_positions(recorder):
    tree = MerkleTree([str(i) for i in range(9)], arity=3)
    display.proof_extracted(extract_path(tree, 4))
    text = recorder.export_text()
    assert "LEAF 4" in text
    assert "2 step(s)" in text
    assert tree[3].hex()[:8] in text


def test_single_leaf_proof_message(recorder):
    tree = MerkleTree([b"solo"])
    display.proof_extracted(extract_path(tree, 0))
    assert "Single-leaf tree" in recorder.export_text()


def test_verification_and_summary(recorder):
    display.verification_result(3, True)
    display.verification_result(4, False)
    display.summary(1, 2)
    text = recorder.export_text()
    assert "Leaf 3 verified" in text
    assert "Leaf 4 does NOT match" in text
    assert "1/2 leaves verified." in text


def test_halt(recorder):
    display.halt("boom")
    assert "boom" in recorder.export_text()

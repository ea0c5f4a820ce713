from unittest.mock import patch

import pytest

from nary_merkle import run


@pytest.fixture(autouse=True)
def quiet(monkeypatch):
    for name in ("MERKLE_DIGEST", "MERKLE_ARITY", "MERKLE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    with patch.object(run, "load_dotenv"), patch.object(run, "display") as display:
        yield display


def test_main_verifies_demo_leaves(quiet):
    assert run.main([]) == 0
    quiet.summary.assert_called_once_with(8, 8)
    assert quiet.verification_result.call_count == 8


def test_main_honours_environment(quiet, monkeypatch):
    monkeypatch.setenv("MERKLE_DIGEST", "md5")
    monkeypatch.setenv("MERKLE_ARITY", "3")
    assert run.main([str(i) for i in range(9)]) == 0
    quiet.banner.assert_called_once_with("md5", 3, 9)
    tree = quiet.tree_committed.call_args.args[0]
    assert tree.root.hex() == "0733c4cd580b1523cfbb9751f42e9420"


def test_main_halts_on_invalid_layout(quiet):
    assert run.main(["a", "b", "c"]) == 1
    quiet.halt.assert_called_once()
    assert "3 leaves" in quiet.halt.call_args.args[0]
    quiet.tree_committed.assert_not_called()


def test_main_halts_on_unknown_digest(quiet, monkeypatch):
    monkeypatch.setenv("MERKLE_DIGEST", "whirlpool")
    assert run.main(["a", "b"]) == 1
    assert "whirlpool" in quiet.halt.call_args.args[0]


def test_main_halts_on_bad_arity(quiet, monkeypatch):
    monkeypatch.setenv("MERKLE_ARITY", "two")
    assert run.main(["a", "b"]) == 1
    quiet.halt.assert_called_once()


def test_main_halts_on_bad_log_level(quiet, monkeypatch):
    monkeypatch.setenv("MERKLE_LOG_LEVEL", "loud")
    with patch.object(run.logging, "basicConfig", side_effect=ValueError("Unknown level: 'LOUD'")):
        assert run.main(["a", "b"]) == 1
    assert "LOUD" in quiet.halt.call_args.args[0]
    quiet.tree_committed.assert_not_called()

# display.py
# All terminal output for the nary-merkle entry point.
#
# This module owns presentation entirely. Library modules never print;
# run.py calls named functions here. Swap this file to change the entire UI.
#
# Colour language:
#   cyan   : tree structure
#   yellow : proofs
#   green  : verified / confirmed
#   red    : failures, halts

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from nary_merkle.merkle import MerkleTree
from nary_merkle.models import MerkleProof

console = Console()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _label(tag: str, color: str) -> Text:
    t = Text()
    t.append(f" {tag} ", style=f"bold white on {color}")
    return t


def _short(digest: bytes, keep: int = 8) -> str:
    value = digest.hex()
    if len(value) <= keep * 2 + 1:
        return value
    return f"{value[:keep]}…{value[-keep:]}"


# ---------------------------------------------------------------------------
# Tree
# ---------------------------------------------------------------------------


def banner(digest_name: str, arity: int, leafs: int) -> None:
    console.print()
    console.print(
        Panel.fit(
            "[bold cyan]N-ary Merkle Tree[/bold cyan]\n\n"
            f"[dim]Digest :[/dim] [white]{digest_name}[/white]\n"
            f"[dim]Arity  :[/dim] [white]{arity}[/white]\n"
            f"[dim]Leaves :[/dim] [white]{leafs}[/white]",
            border_style="cyan",
            padding=(1, 4),
        )
    )


def tree_table(tree: MerkleTree) -> Table:
    """One row per node: index, row, digest and children (or 'leaf')."""
    table = Table(box=box.SIMPLE_HEAVY, show_header=True, header_style="bold cyan", padding=(0, 1))
    table.add_column("Node", justify="right", width=6)
    table.add_column("Row", justify="center", width=4)
    table.add_column("Digest", style="white")
    table.add_column("Children", style="dim white")

    for index, node, children in tree.nodes():
        table.add_row(
            str(index),
            str(tree.row_of(index)),
            node.hex(),
            "leaf" if children is None else ", ".join(str(c) for c in children),
        )
    return table


def tree_committed(tree: MerkleTree) -> None:
    console.print()
    console.print(
        Panel(
            f"[bold green]Root:[/bold green] [white]{tree.root.hex()}[/white]\n"
            f"[dim]len={tree.len} rows={tree.row_count} digest_size={tree.digest_size}[/dim]",
            title=_label("TREE BUILT", "cyan"),
            border_style="cyan",
            padding=(0, 2),
        )
    )
    console.print(tree_table(tree))


# ---------------------------------------------------------------------------
# Proofs
# ---------------------------------------------------------------------------


def proof_table(proof: MerkleProof) -> Table:
    table = Table(box=box.SIMPLE, show_header=True, header_style="bold yellow", padding=(0, 1))
    table.add_column("Step", justify="center", width=6)
    table.add_column("Pos", justify="center", width=5)
    table.add_column("Siblings", style="yellow")

    for number, step in enumerate(proof.steps):
        table.add_row(str(number), str(step.position), "  ".join(_short(s) for s in step.siblings))
    return table


def proof_extracted(proof: MerkleProof) -> None:
    console.print()
    console.print(
        Rule(f"[yellow]LEAF {proof.leaf_index} | {len(proof.steps)} step(s)[/yellow]", style="yellow")
    )
    if proof.steps:
        console.print(proof_table(proof))
    else:
        console.print("[dim yellow]  Single-leaf tree: the leaf digest is the root.[/dim yellow]")


def verification_result(leaf_index: int, ok: bool) -> None:
    if ok:
        console.print(f"  [bold green]✓ Leaf {leaf_index} verified against root[/bold green]")
    else:
        console.print(f"  [bold red]✗ Leaf {leaf_index} does NOT match root[/bold red]")


def summary(verified: int, total: int) -> None:
    color = "green" if verified == total else "red"
    console.print()
    console.print(
        Panel(
            f"[bold {color}]{verified}/{total} leaves verified.[/bold {color}]",
            title=_label("RESULT", color),
            border_style=color,
            padding=(0, 2),
        )
    )
    console.print()


def halt(reason: str) -> None:
    console.print()
    console.print(
        Panel(
            f"[bold white]{reason}[/bold white]",
            title=_label("HALT", "red"),
            border_style="red",
            padding=(0, 2),
        )
    )
    console.print()

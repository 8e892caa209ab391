#!/usr/bin/env python3
"""
Sectioned Table Example

Demonstrates the table renderer with spanning header rows, the way
``managed-alias list`` groups commands and paths.

Run:
    python examples/sectioned_table.py
"""

from managed_alias.table import Cell, Table


def build(style: str) -> Table:
    table = Table(style=style)
    table.add_row([Cell("COMMANDS", 2)])
    table.add_row(["ll", "ls -la"])
    table.add_row(["gl", "git log --oneline"])
    table.add_row([Cell("PATHS", 2)])
    table.add_row(["proj", "/home/u/project"])
    return table


def main() -> None:
    for style in ("simple", "extended"):
        print(f"Style: {style}")
        print(build(style).render())
        print()


if __name__ == "__main__":
    main()

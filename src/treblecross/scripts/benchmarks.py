#!/usr/bin/env python3
"""
Solver Performance Benchmark
============================

Location: src/treblecross/scripts/benchmarks.py

Times both solver variants on empty boards of increasing size, to show
where exhaustive search stops being interactive.

USAGE
-----
    python -m treblecross.scripts.benchmarks [max_size] [options]

ARGUMENTS
---------
    max_size    Largest board to solve (default: 10). Boards start at 3.

OPTIONS
-------
    --pruned-only   Skip plain negamax (it becomes very slow first)
    --profile       cProfile one alpha-beta solve of max_size

EXAMPLES
--------
    # Both variants up to 10 cells
    python -m treblecross.scripts.benchmarks

    # Alpha-beta only, up to 14 cells
    python -m treblecross.scripts.benchmarks 14 --pruned-only

INTERPRETING RESULTS
--------------------
Nodes grow roughly geometrically with board size. Plain negamax recomputes
every subtree, so each added cell multiplies its time. Alpha-beta produces
the same scores while visiting fewer positions below the first move.
"""

import sys

from treblecross.debug.profiler import print_solve_summary, profile_solve, profile_solver, repeat_solve
from treblecross.games.game_state import GameState

MIN_SIZE = 3


def main():
    # Handle --help
    if "--help" in sys.argv or "-h" in sys.argv:
        print(__doc__)
        sys.exit(0)

    # Parse args
    max_size = 10
    pruned_only = False
    do_profile = False

    args = [a for a in sys.argv[1:] if not a.startswith("-")]
    flags = [a for a in sys.argv[1:] if a.startswith("-")]

    for flag in flags:
        if flag == "--pruned-only":
            pruned_only = True
        elif flag == "--profile":
            do_profile = True
        else:
            print(f"Unknown flag: {flag}")
            print("Use --help for usage information")
            sys.exit(1)

    for arg in args:
        if arg.isdigit():
            max_size = int(arg)
        else:
            print(f"Unknown argument: {arg}")
            print("Use --help for usage information")
            sys.exit(1)

    variants = ["alphabeta"] if pruned_only else None

    print(f"\n{'='*64}")
    print(f"Benchmark: board sizes {MIN_SIZE}..{max_size}")
    print(f"{'='*64}")

    print("\n[1/2] Solver sweep...")
    profile_solver(range(MIN_SIZE, max_size + 1), variants=variants)
    print_solve_summary()

    print("\n[2/2] Stability check...")
    repeat_solve(max_size, variant="alphabeta", runs=3)

    if do_profile:
        print(f"\ncProfile: alphabeta on {max_size} cells")
        profile_solve(GameState(max_size), "alphabeta")

    print("\nDone!")


if __name__ == "__main__":
    main()

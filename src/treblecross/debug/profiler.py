"""
Timing and profiling for the solvers.

Usage:
    from treblecross.debug.profiler import profile_solver, print_solve_summary

    # Solve empty boards of size 3..10 with both variants
    profile_solver(range(3, 11))
    print_solve_summary()

Every `timed` block is filed under a label ("solve", "alphabeta[9]", ...).
When a SearchStats is handed in, its node and cutoff counts are added to the
same label, so the summary shows how much work each second bought.
"""

import cProfile
import io
import pstats
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from treblecross.games.game_state import GameState
from treblecross.solver import SearchStats
from treblecross.utils.factory import create_solver


# ---------------------------------------------------------------------------
# Label registry
# ---------------------------------------------------------------------------

@dataclass
class SolveTiming:
    """Wall time and search counters accumulated under one label."""
    calls: int = 0
    seconds: float = 0.0
    slowest: float = 0.0
    nodes: int = 0
    cutoffs: int = 0

    @property
    def mean(self) -> float:
        return self.seconds / self.calls if self.calls else 0.0

    def add(self, elapsed: float, stats: Optional[SearchStats] = None) -> None:
        self.calls += 1
        self.seconds += elapsed
        self.slowest = max(self.slowest, elapsed)
        if stats is not None:
            self.nodes += stats.nodes
            self.cutoffs += stats.cutoffs


_registry: Dict[str, SolveTiming] = {}


@contextmanager
def timed(label: str, stats: Optional[SearchStats] = None):
    """
    File the wall time of the block under `label`.

    `stats` is read after the block finishes, so pass the same object the
    solver fills in. Time is recorded even if the block raises.
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        entry = _registry.setdefault(label, SolveTiming())
        entry.add(time.perf_counter() - start, stats)


def get_timing_stats() -> Dict[str, SolveTiming]:
    return dict(_registry)


def clear_timing_stats() -> None:
    _registry.clear()


def print_solve_summary() -> None:
    """One row per label, slowest total first."""
    if not _registry:
        print("Nothing timed yet.")
        return

    header = f"{'Label':<18} {'Calls':>6} {'Total':>11} {'Mean':>11} {'Nodes':>12} {'Cutoffs':>10}"
    print("\n" + header)
    print("-" * len(header))
    for label, entry in sorted(_registry.items(), key=lambda kv: -kv[1].seconds):
        print(
            f"{label:<18} {entry.calls:>6} "
            f"{entry.seconds*1000:>9.1f}ms {entry.mean*1000:>9.2f}ms "
            f"{entry.nodes:>12,} {entry.cutoffs:>10,}"
        )


# ---------------------------------------------------------------------------
# Solver sweeps
# ---------------------------------------------------------------------------

@dataclass
class SolverRun:
    """One timed solve of an empty board."""
    variant: str
    size: int
    elapsed: float
    nodes: int
    cutoffs: int


def profile_solver(
    sizes: Iterable[int],
    variants: Optional[List[str]] = None,
    verbose: bool = True,
) -> List[SolverRun]:
    """
    Solve an empty board of every size with every variant.

    Returns one SolverRun per (size, variant), in that order. Each solve is
    also filed under the label "<variant>[<size>]".
    """
    names = variants or ["negamax", "alphabeta"]
    runs: List[SolverRun] = []

    for size in sizes:
        for name in names:
            solver = create_solver(name)
            stats = SearchStats()
            start = time.perf_counter()
            with timed(f"{name}[{size}]", stats):
                solver(GameState(size), stats)
            run = SolverRun(name, size, time.perf_counter() - start, stats.nodes, stats.cutoffs)
            runs.append(run)
            if verbose:
                print(
                    f"  {name:<10} n={size:<3} {run.elapsed*1000:>10.1f}ms "
                    f"{run.nodes:>12,} nodes {run.cutoffs:>10,} cutoffs"
                )

    return runs


def repeat_solve(size: int, variant: str = "alphabeta", runs: int = 3) -> List[float]:
    """Solve the same empty board `runs` times. Returns the wall times."""
    solver = create_solver(variant)
    times = []
    for i in range(runs):
        start = time.perf_counter()
        solver(GameState(size))
        times.append(time.perf_counter() - start)
        print(f"  Run {i + 1}: {times[-1]:.3f}s")

    spread = max(times) - min(times)
    print(f"  mean {sum(times) / len(times):.3f}s, spread {spread:.3f}s")
    return times


def profile_solve(state: GameState, variant: str = "alphabeta", top_n: int = 20) -> List[int]:
    """Run one solve under cProfile and print the hottest functions by own time."""
    solver = create_solver(variant)
    profiler = cProfile.Profile()
    profiler.enable()
    scores = solver(state)
    profiler.disable()

    stream = io.StringIO()
    pstats.Stats(profiler, stream=stream).sort_stats("tottime").print_stats(top_n)
    print(stream.getvalue())
    return scores

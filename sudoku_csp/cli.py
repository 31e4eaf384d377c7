"""Command line entry point: solve a board, a directory of boards, or a random board."""

from __future__ import annotations

import sys
from pathlib import Path

from .board import SudokuBoard
from .solver import BTSolver, Consistency
from .trail import Trail

_UNAVAILABLE = {"MRV", "MAD", "LCV", "NOR", "TOURN"}


def _make_solver(board: SudokuBoard, trail: Trail, consistency: Consistency) -> BTSolver:
    solver = BTSolver(board, trail, consistency)
    if consistency is Consistency.FORWARD_CHECKING:
        solver.check_consistency()
    solver.solve(600.0)
    return solver


def _report(solver: BTSolver, trail: Trail) -> None:
    if solver.has_solution:
        print(solver.solution())
        print(f"Trail Pushes: {trail.push_count}")
        print(f"Backtracks: {trail.undo_count}")
    else:
        print("Failed to find a solution")


def main(argv: list[str] | None = None) -> int:
    """Parse the arguments, run the solver and print the results."""
    args = sys.argv[1:] if argv is None else argv
    path = ""
    consistency = Consistency.ASSIGNMENTS

    for token in args:
        if token == "FC":
            consistency = Consistency.FORWARD_CHECKING
        elif token in _UNAVAILABLE:
            print(f"[ERROR] Heuristic {token} is not available.", file=sys.stderr)
            return 2
        else:
            path = token

    trail = Trail()

    if not path:
        board = SudokuBoard.random(3, 3, 7)
        print(board)
        _report(_make_solver(board, trail, consistency), trail)
        return 0

    target = Path(path)
    if target.is_dir():
        try:
            entries = sorted(target.iterdir(), key=lambda p: p.name)
        except OSError:
            print("[ERROR] Failed to open directory.")
            return 0
        solutions = 0
        for entry in entries:
            if entry.name.startswith(".") or not entry.is_file():
                continue
            print(f"Running board: {entry.name}")
            solver = _make_solver(SudokuBoard.from_file(entry), trail, consistency)
            if solver.has_solution:
                solutions += 1
            trail.clear()
        print(f"Solutions Found: {solutions}")
        print(f"Trail Pushes: {trail.push_count}")
        print(f"Backtracks: {trail.undo_count}")
        return 0

    try:
        board = SudokuBoard.from_file(target)
    except (OSError, ValueError) as error:
        print(f"[ERROR] Failed to read board: {error}", file=sys.stderr)
        return 1
    print(board)
    _report(_make_solver(board, trail, consistency), trail)
    return 0


if __name__ == "__main__":
    sys.exit(main())
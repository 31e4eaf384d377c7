# sudoku_csp

A backtracking solver for generalised Sudoku. It models the board as a
constraint network and does a depth-first search over it. A board has blocks
of `p` rows by `q` columns, so the grid is `N = p * q` cells on each side.

Each cell is a variable whose domain is the values `1..N`. A given cell starts
with a one-value domain and never changes. Every row, column and block is an
all-different constraint. While it searches, the solver saves domains on a
trail, so it can restore them when it backtracks.

## Installation

```
pip install .
```

To also install the test requirements:

```
pip install ".[test]"
```

## Command line

```
sudoku-csp [FC] [board-file-or-directory]
```

The same command is available as `python -m sudoku_csp.cli`.

- With no path, the command makes a random board with 3x3 blocks, holding
  8 randomly placed legal values. It prints the board and tries to solve it.
- With a file, it loads that board, prints it, and then prints the solution
  together with the number of trail pushes and backtracks. If no solution is
  found it prints `Failed to find a solution`. A file that cannot be read or
  parsed gives an error message on standard error and exit status 1.
- With a directory, it solves every regular file in it, in name order, and
  skips names that start with a dot. For each board it prints
  `Running board: <name>`. At the end it reports how many boards were solved
  and the total trail pushes and backtracks.
- `FC` turns on forward checking. Without it, the solver only checks that the
  current assignments are consistent.

The search always picks the first unassigned cell and tries its values in
ascending order. It gives up once 60 seconds or less of its 600-second CPU
time budget remain.

### Board file format

The first two numbers are `p` and `q`. After them come `N * N` tokens,
separated by whitespace, in row order.

- `0` marks an empty cell.
- Values are written in base 36 with the digits `0-9A-Z`, so on large boards
  `A` stands for 10.

```
2 2
1 0 0 4
0 0 1 0
0 1 0 0
4 0 0 1
```

## Library use

```python
from sudoku_csp.board import SudokuBoard
from sudoku_csp.trail import Trail
from sudoku_csp.solver import BTSolver, Consistency

board = SudokuBoard.from_file("board.txt")
trail = Trail()
solver = BTSolver(board, trail, Consistency.FORWARD_CHECKING)
solver.check_consistency()
solver.solve(600.0)
if solver.has_solution:
    print(solver.solution())
print(trail.push_count, trail.undo_count)
```

The modules:

- `sudoku_csp.board`: `SudokuBoard` builds boards from a grid, from text
  (`SudokuBoard.parse`), from a file (`SudokuBoard.from_file`) or at random
  (`SudokuBoard.random`, with an optional `random.Random`). It also prints
  them. `int_to_odometer` and `odometer_to_int` convert base-36 cell tokens.
- `sudoku_csp.domain`: `Domain`, the ordered set of values a cell may still
  take.
- `sudoku_csp.variable`: `Variable`, a cell with its row, column, block and
  domain.
- `sudoku_csp.constraint`: `Constraint`, an all-different constraint.
- `sudoku_csp.network`: `ConstraintNetwork.from_board` builds the variables
  and constraints. `neighbors_of`, `modified_constraints` and `to_board`
  serve the search.
- `sudoku_csp.trail`: `Trail` saves domains with `push`, marks depths with
  `place_marker` and restores with `undo`. `clear` drops the saved entries but
  keeps the push and undo counts.
- `sudoku_csp.solver`: `BTSolver` and the `Consistency` choice:
  `ASSIGNMENTS`, `FORWARD_CHECKING` or `ARC_CONSISTENCY`. Arc consistency is
  only available from the library, not from the command line.

## What it does not do

The package has no variable or value ordering heuristics: no minimum remaining
values, degree tie-breaking or least constraining value. It also has no
Norvig-style propagation. The command line rejects the tokens `MRV`, `MAD`,
`LCV`, `NOR` and `TOURN` with an error and exit status 2.
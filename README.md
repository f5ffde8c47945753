# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
small fixed set of moves. It prints the moves it uses, one per line.
Replaying those moves sorts `a` in ascending order, with the smallest
value on top.

## Moves

| Move  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of `a`                    |
| `sb`  | swap the top two elements of `b`                    |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: the top element goes to the bottom   |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate `a` down: the bottom element goes to the top |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` together                            |

## Installation

```
pip install .
```

## Command line

Give the numbers as separate arguments, or as one argument with the
numbers separated by spaces. The first number is the top of the stack.

```
pushswap 3 2 1
pushswap "4 67 3 87 23"
```

Each move is printed to standard output on its own line. Input that is
already sorted prints nothing, and the command exits with status 0.

Each number must be an optional `+` or `-` followed only by digits. It
must fit in the 32-bit signed range and have at most ten significant
digits. Leading zeros do not count towards the ten. A number may not
repeat one given earlier. If any of these rules is broken, `Error` is
written to standard error and the command exits with status 255.

The command also exits with status 255, printing nothing, in these
cases:

- there are no arguments;
- there is a single empty argument;
- there is a single argument that holds only spaces.

## Library use

```python
from pushswap.sorting import solve

moves = solve([3, 2, 1])
print(moves)  # a list of move names such as "ra", "sa", ...
```

### `pushswap.sorting`

- `solve(values)` returns the moves that sort the values, as a list of
  strings.
- `sort_board(board)` sorts a `Board` in place. It does nothing if `a`
  is already sorted. Two values get a single `sa`, three get
  `small_sort`, and four or more get `turk`.
- `turk(board)` handles four or more values. It pushes all but three
  values to `b`, or for exactly five values it pushes the two lowest.
  It sorts the three left on `a`, then brings the values on `b` back one
  at a time. Each time it picks the value that needs the fewest
  rotations, and at the end it rotates the lowest value to the top.
- The steps used along the way are also public: `init_map`,
  `set_targets`, `set_prices`, `set_cheapest`, `rotate_both`,
  `revrotate_both`, `finish_rotation`, `small_sort` and `subsmall_sort`.

### `pushswap.stacks`

- `Board(values=(), out=None)` holds stack `a`, filled from `values` with
  the first value on top, and an empty stack `b`. It has one method per
  move (`sa`, `sb`, `ss`, `pa`, `pb`, `ra`, `rb`, `rr`, `rra`, `rrb`,
  `rrr`).
  - Every move appends its name to `board.moves`. If `out` is a text
    stream, the name is also written there followed by a newline.
  - `pa` and `pb` on an empty source stack change nothing but are still
    recorded.
  - A swap on a stack with fewer than two elements raises `IndexError`.
- `Stack` is a stack of `Node` objects whose first element is the top.
  - It supports `len()`, iteration and truth testing.
  - Accessors: `top`, `last`, `values`.
  - Changes: `push`, `pop`, `append`, `swap`, `rotate`, `reverse_rotate`.
  - Queries: `is_sorted`, `highest`, `lowest`, `highest_value`,
    `cheapest`.
  - `reindex` sets the bookkeeping used by the sorter.
- `Node` holds a value (`val`) together with the sorter's bookkeeping:
  - `index`
  - `push_cost`
  - `above_median`
  - `cheapest`
  - `target`

### `pushswap.parsing`

- `parse_arguments(args)` turns command-line words into a list of
  integers by the rules above. It raises `InputError`, a subclass of
  `ValueError`, on bad input. A single argument is split on spaces. No
  arguments, or an empty single argument, give an empty list.
- Helpers:
  - `is_malformed(token)`
  - `parse_long(text)`
  - `digit_count(text)`
  - `split_words(text, sep=" ")`

## What it does not do

The package only produces moves. It has no command that reads a list of
moves and checks whether they sort a given input. To verify the output,
replay the moves on a `Board` yourself.

## Running the tests

```
pip install ".[test]"
pytest
```
# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a small
set of instructions. You can also check whether a list of instructions
really sorts a given input.

## Instructions

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the two top elements of `a`                    |
| `sb`  | swap the two top elements of `b`                    |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` upwards (the top goes to the bottom)     |
| `rb`  | rotate `b` upwards                                  |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate `a` downwards (the bottom goes to the top)   |
| `rrb` | rotate `b` downwards                                |
| `rrr` | `rra` and `rrb` together                            |

A move on a stack too small for it (swapping or rotating fewer than two
values, pushing from an empty stack) does nothing.

## Installation

```
pip install .
```

## Command line

Print a list of instructions, one per line, that sorts the numbers:

```
push_swap 3 2 5 1 4
```

The first number given is the top of stack `a`. Numbers can be given as
separate arguments, as one quoted argument holding several numbers separated
by spaces, or as a mix of the two. If the input is already sorted, nothing is
printed.

The command writes `Error` to standard error when an argument holds no
number, when a word is not an optional sign followed by digits, when a
number's magnitude is above 2147483647, or when a value appears twice.

Three, four and five values are sorted by dedicated routines; any other
count is sorted by moving ranges of ranks to `b` and bringing them back
largest first.

Check a list of instructions, one per line on standard input:

```
push_swap 3 2 5 1 4 | checker 3 2 5 1 4
```

`checker` takes the numbers the same way and:

- prints `OK` at once, without reading standard input, when the numbers are
  already sorted;
- otherwise applies every line, then prints `OK` when `a` is sorted and `b`
  is empty, and `KO` when `a` is not sorted;
- prints nothing when `a` ends sorted but `b` still holds values.

A line that is not exactly an instruction's name followed by a newline makes
it write `Error` to standard error, as does bad input. Both commands exit
with status 0.

## Library use

```python
from pushswap.sorting import solve
from pushswap.checker import check

ops = solve([3, 2, 5, 1, 4])
print(" ".join(op.value for op in ops))
print(check([3, 2, 5, 1, 4], [op.value + "\n" for op in ops]))  # OK
```

- `pushswap.stacks` has the `Op` enumeration, `parse_op` for turning an
  instruction line into an `Op` (raising `ValueError` for an unknown one),
  and `StackPair`, which holds both stacks as lists whose last element is
  the top, applies moves with `StackPair.apply`, records them in
  `StackPair.history`, and tells with `StackPair.is_sorted` whether `a` is
  in order.
- `pushswap.parsing` reads and checks arguments (`parse_arguments`,
  `parse_int`, `is_number`, `count_words`) and turns values into their
  ranks, 1 for the smallest (`index_values`); bad input raises `InputError`,
  a subclass of `ValueError`.
- `pushswap.sorting` has `solve`, which returns the moves that sort a list
  of values, the routines it is built from (`three_sort`, `four_sort`,
  `five_sort`, `chunk_sort`, `push_back`, `sort_stacks`), and `main`, the
  `push_swap` command.
- `pushswap.checker` has `check`, which returns `"OK"`, `"KO"` or `None`
  as described above, and `main`, the `checker` command.

## Running the tests

```
pip install .[test]
pytest
```
# pushswap

`pushswap` sorts a list of integers using two stacks, `a` and `b`, and a small fixed set of operations. It prints each operation it uses, one per line. The integers start on stack `a` with the first number on top. When it finishes, stack `a` holds them in ascending order from the top and stack `b` is empty.

## Operations

| Operation | Effect |
|-----------|--------|
| `sa` / `sb` / `ss` | swap the top two elements of `a`, of `b`, or of both |
| `pa` / `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra` / `rb` / `rr` | rotate `a`, `b` or both upward, so the top element goes to the bottom |
| `rra` / `rrb` / `rrr` | rotate `a`, `b` or both downward, so the bottom element goes to the top |

An operation on a stack with too few elements changes nothing.

## Installation

```
pip install .
```

## Command line

```
pushswap 3 2 1
```

prints:

```
ra
sa
```

The command can also be run as `python -m pushswap.cli`.

One argument may hold several numbers separated by spaces, so `pushswap "4 67 3" 87 23` works as well. If the input is already sorted, or there is no input, nothing is printed and the exit status is 0.

The input is rejected in any of these cases:

- a token is not an optional `+` or `-` followed by one or more digits
- a number is outside the 32-bit signed range (-2147483648 to 2147483647)
- a number appears more than once

When the input is rejected, the command writes `error` to standard output with no trailing newline and exits with status 1.

## Library use

```python
from pushswap.parsing import parse_arguments
from pushswap.stacks import PushSwap
from pushswap.sort import sort_stacks

values = parse_arguments(["5 1 4", "2", "3"])
stacks = PushSwap(values)
operations = sort_stacks(stacks)   # list of operation names, e.g. ["pb", "ra", ...]
assert stacks.a == [1, 2, 3, 4, 5]
```

- `pushswap.parsing`: `is_valid_int`, `parse_argument`, `parse_arguments` and `is_sorted`. Invalid or duplicate input raises `InputError`, a subclass of `ValueError`.
- `pushswap.stacks`: `PushSwap` holds the lists `a` and `b`, where index 0 is the top. It has one method per operation (`sa`, `sb`, `ss`, `pa`, `pb`, `ra`, `rb`, `rr`, `rra`, `rrb`, `rrr`). Each call is recorded in `operations`, even when it has no effect. `max_index` and `min_index` return the position of the first largest or smallest value.
- `pushswap.sort`: `sort_stacks` picks a strategy by the size of `a`:
  - `sort_two` for two numbers
  - `sort_three` for three numbers
  - `sort_small` for four or five numbers
  - `sort_big` for anything else

  `sort_big` pushes `a` onto `b` in chunks. The chunk step is `size // 5` up to 100 elements, and `size // 11 - 2` above that, never less than 1. It then pulls the maxima back to `a`. The helpers `find_part`, `best_rotate` and `push_back_to_b` are also available.

## What it does not do

The package only produces a sequence of operations. It does not read a list of operations and check whether that list sorts a given input.

## Running the tests

```
pip install ".[test]"
pytest
```
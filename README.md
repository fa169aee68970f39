# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
fixed set of stack operations. The result is the sequence of operations
that leaves every number on stack `a` in ascending order, smallest on top.

## Operations

| Name  | Effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the top two elements of `a`                |
| `sb`  | swap the top two elements of `b`                |
| `ss`  | `sa` and `sb` together                          |
| `pa`  | move the top of `b` onto `a`                    |
| `pb`  | move the top of `a` onto `b`                    |
| `ra`  | rotate `a` up (top goes to the bottom)          |
| `rb`  | rotate `b` up                                   |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate `a` down (bottom goes to the top)        |
| `rrb` | rotate `b` down                                 |
| `rrr` | `rra` and `rrb` together                        |

## Installation

```
pip install .
```

## Command line

Give the numbers as separate arguments, or as one space-separated argument:

```
push-swap 3 2 1
push-swap "5 -1 4 0 2"
```

The first number given is the top of stack `a`. Each operation is printed
on its own line on standard output.

- No arguments, a single number, or numbers already in strictly ascending
  order print nothing.
- An argument that is not an optional `+` or `-` followed by decimal digits,
  a number outside the 32-bit signed range, or a repeated number prints
  `Error` on standard error and nothing on standard output.

The exit status is 0 in every case, including errors.

## Library use

```python
from pushswap.sorter import sort_numbers

ops = sort_numbers([3, 2, 1])
print(ops)
```

`sort_numbers` returns the list of operation names. It raises `ValueError`
when a number occurs twice, and returns an empty list for fewer than two
numbers or numbers already in ascending order.

The pieces it is built from can be used on their own:

- `pushswap.parsing.parse_arguments` turns command-line style arguments into
  integers, raising `pushswap.parsing.ParseError` (a `ValueError`) on bad
  input. `count_words`, `is_valid_number` and `safe_atoi` are the checks it
  uses.
- `pushswap.stacks.Stacks` holds the two stacks as `a` and `b` (top at index
  0) and has one method per operation. Each operation that changes a stack
  appends its name to `moves`; `sa`, `sb`, `ra`, `rb`, `rra` and `rrb` take a
  `record` argument that, when false, performs the operation without logging
  it. `ss`, `rr` and `rrr` are always logged.
- `pushswap.sorter.Sorter` runs the median-split strategy on a list of
  numbers; `Sorter(numbers).run()` returns the recorded moves, and the final
  stacks are on its `stacks` attribute. Unlike `sort_numbers`, it does not
  check for duplicates or already sorted input.
- `pushswap.helpers` has the small list utilities the strategy relies on,
  such as `calc_median`, `calc_pushed`, `has_duplicates` and
  `is_strictly_ascending`.

## What it does not do

The package only produces operation sequences. It has no command that reads
a sequence of operations and checks whether it sorts a given input; use
`Stacks` to replay one in Python.

## Running the tests

```
pip install .[test]
pytest
```
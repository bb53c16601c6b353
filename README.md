# pushswap

pushswap sorts a list of distinct integers with two stacks, `a` and `b`, and a fixed set of operations. It works out the sequence of operations that leaves every number in stack `a` in ascending order, with the smallest number on top and `b` empty. It then prints that sequence.

## Operations

| Move  | Effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the top two elements of `a`                |
| `sb`  | swap the top two elements of `b`                |
| `ss`  | `sa` and `sb` together                          |
| `pa`  | move the top of `b` onto `a`                    |
| `pb`  | move the top of `a` onto `b`                    |
| `ra`  | rotate `a` up: the top goes to the bottom       |
| `rb`  | rotate `b` up                                   |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate `a` down: the bottom goes to the top     |
| `rrb` | rotate `b` down                                 |
| `rrr` | `rra` and `rrb` together                        |

An operation on a stack with too few elements leaves that stack unchanged.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Command line

Pass the numbers as separate arguments:

```
pushswap 3 2 1
```

Or pass them as a single space-separated argument:

```
pushswap "3 2 1"
```

In both forms the first number is the top of stack `a`. The command writes one operation per line to standard output and exits with status 0. If the numbers are already in order, it prints nothing.

On bad input, the command writes `Error` to standard error and exits with status 1. Bad input is any of the following:

- a token that is not an optional `+` or `-` followed by decimal digits, such as `1a`, `-` or `1.5`
- a number outside the 32-bit signed range, -2147483648 to 2147483647
- a number that appears more than once (`0` and `-0` count as the same number)

The command exits with status 1 and prints nothing in these cases:

- there are no arguments
- there is one empty argument
- there is one argument that holds only spaces

## Library use

```python
from pushswap.parsing import InputError, parse_stack, split_words
from pushswap.sorting import is_sorted, solve
from pushswap.stacks import Stacks

moves = solve([3, 2, 1])                              # list of move names
values = parse_stack(split_words("5 -1 42", " "))     # [5, -1, 42]

stacks = Stacks([2, 1, 3])
stacks.sa()
stacks.pb()
print(stacks.a, stacks.b, stacks.moves)
```

- `pushswap.stacks.Stacks(values)` holds the stacks `a` and `b` as deques, with the top at index 0. It has one method per move, named as in the table above. Each call is recorded in `moves`.
- `pushswap.parsing`:
  - `split_words(text, separator)` splits text and drops empty pieces.
  - `is_valid_number(token)` checks the syntax of a token.
  - `parse_number(token)` converts one token.
  - `parse_stack(tokens)` converts a sequence of tokens and rejects duplicates.
  - `parse_number` and `parse_stack` raise `InputError`, a subclass of `ValueError`, on bad input.
- `pushswap.sorting`:
  - `solve(values)` returns the list of moves.
  - `sort_three`, `handle_five` and `push_swap` apply moves to a `Stacks` object.
  - `is_sorted`, `target_index`, `rotation_cost` and `cheapest_index` are the helpers that choose each move.
- `pushswap.cli.main(argv=None)` runs the command and returns its exit status.

## Limitations

pushswap only produces a sequence of moves. It has no command that reads a list of moves and checks whether they sort a given input.
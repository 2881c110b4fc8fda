# pushswap

Input validation for the push_swap puzzle and the stack operations the
puzzle is played with.

The `push-swap` command takes a list of distinct integers, either as
separate arguments or as one argument with the numbers separated by
single spaces. It checks the input, loads the numbers into stack A and
prints `1` if the stack is in order or `0` if it is not.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
push-swap 3 1 2
push-swap "3 1 2"
```

When the input is rejected, the command prints a message such as
`Error(Integer repeats)` instead of the result. The exit status is 0
either way. Input is rejected when:

- no numbers are given, or a single argument holds only one number;
- a single argument contains consecutive spaces;
- separate arguments and a space-separated string are mixed;
- a token holds anything other than digits and a leading minus sign,
  has a leading zero (such as `003`), or is a lone `-`;
- a number lies outside the 32-bit signed integer range;
- a number appears more than once.

## Library use

```python
from pushswap.stack import Stack, push_to_b, rotate_both
from pushswap.validation import InputError, validate_arguments

tokens = validate_arguments(["4", "2", "7"])  # raises InputError on bad input

a = Stack.from_tokens(tokens)
b = Stack()
push_to_b(a, b)
rotate_both(a, b)
print(a.values(), b.values())   # [7, 2] [4]
print(a.find_min())             # the Plate holding 2
print(a.is_in_order())          # False
```

`validate_arguments` takes the arguments without the program name and
returns the number tokens. `pushswap.validation` also exposes the
individual checks (`is_multi_word`, `has_single_spaces`,
`has_valid_characters`, `within_int_range`, `within_limits`,
`has_no_repeats`, `check_integers`).

`Stack` holds `Plate` objects, top first. It supports `len()`,
iteration, `values()`, `rotate()` (top value to the bottom),
`reverse_rotate()` (bottom value to the top), `find_min()` and
`is_in_order()`. `is_in_order()` is true when the values from the
smallest one down to the bottom ascend and, if the smallest is not on
top, the values from the top down to the smallest also ascend. The
module functions `push_to_a`, `push_to_b`, `rotate_both` and
`reverse_rotate_both` act on both stacks; `cli.build_stack_a` builds
stack A from the arguments as the command does.

The `pushswap.libft` sub-package holds the helpers the program is built
on: character classification (`chars`), byte-buffer routines
(`memory`), string routines such as `split`, `atoi` and `itoa`
(`strings`), a singly linked list (`linkedlist.LinkedList`) and output
to streams with `putstr_fd`, `putnbr_fd`, `format_printf` and `printf`
(`output`).

## What it does not do

The package does not sort. It computes no sequence of moves and prints
none; the command only reports whether stack A is already in order.
There is no swap move for the top two plates, and the cost fields on
`Plate` are kept but never filled in.
# drillbook

A small collection of classic algorithm exercises. Each one is a plain Python
function, and each has a command that reads a judge-style problem from
standard input and writes the answer to standard output.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from drillbook.brackets import is_balanced
from drillbook.postfix import evaluate_postfix, format_result
from drillbook.searching import binary_search, lower_bound_position, upper_bound_position
from drillbook.distinct import count_distinct
from drillbook.ferris import count_gondolas

is_balanced("{[()]}")                          # True
is_balanced("{[(])}")                          # False

format_result(evaluate_postfix("3 4 + 2 *"))   # "14"

binary_search([1, 3, 5, 7], 5)                 # 3   (1-based position, -1 if absent)
lower_bound_position([1, 3, 5, 7], 4)          # 3   (first value >= 4)
upper_bound_position([1, 3, 5, 7], 7)          # -1  (no value > 7)

count_distinct([2, 3, 2, 2, 3])                # 2
count_gondolas([7, 2, 3, 9], 10)               # 3
```

What each module covers:

| Module                | Contents |
|-----------------------|----------|
| `drillbook.brackets`  | `is_balanced(text)`: every character that is not `(`, `[` or `{` is treated as a closer |
| `drillbook.postfix`   | `evaluate_postfix(expression)` with operators `+ - * / % ^`; `format_result(value)` gives six significant digits; raises `PostfixError` for a missing operand, a bad token or an empty expression, and `ZeroDivisionError` for `/` by zero |
| `drillbook.searching` | `binary_search`, `lower_bound_position`, `upper_bound_position`: 1-based positions in a sorted sequence, `-1` when there is none |
| `drillbook.swaps`     | `bubble_sort_operations(values, kind)` and `sort_two_rows(first, second)`: lists of `(kind, index)` operations, where kind `3` swaps the two rows at an index and kinds `1`/`2` swap neighbours inside row one/two |
| `drillbook.cover`     | `minimum_cover(grid)`: smallest set of rows `(1, r)` and columns `(2, c)` covering every `'o'` cell of a square grid, found by bipartite matching |
| `drillbook.casino`    | `total_winnings(table)`: sum of `abs(a - b)` over every pair of rows, column by column |
| `drillbook.distinct`  | `count_distinct(values)` |
| `drillbook.ferris`    | `count_gondolas(weights, capacity)`: at most two riders per gondola |
| `drillbook.tilt`      | `Portal(low, high, target)`, `max_reachable(start, portals)` and `max_reachable_by_range(start, portals)` |
| `drillbook.numtools`  | `find_index`, `gcd`, `lcm`, `total_digits`, `sum_range`, `is_prime`, `is_power_of_two` |

## Commands

```
drillbook-brackets   < brackets.txt   # a count, then that many strings; YES or NO each
drillbook-postfix    < expression.txt # one postfix expression on the first line
drillbook-search     < queries.txt    # n q, n sorted values, q queries
drillbook-swaps      < rows.txt       # cases; each: n, row one, row two
drillbook-cover      < grid.txt       # n, then an n-by-n grid of 'o' and other characters
drillbook-casino     < tables.txt     # cases; each: n m, then an n-by-m table
drillbook-distinct   < values.txt     # a size, then that many integers
drillbook-ferris     < riders.txt     # n x, then n weights
drillbook-tilt       < portals.txt    # cases; each: n k, then n lines "low high target"
```

`drillbook-search` takes an optional mode: `search` (the default),
`lower` or `upper`. `drillbook-tilt` takes an optional mode: `range` (the
default, `max_reachable_by_range`) or `bounds` (`max_reachable`).

`drillbook-postfix` prints nothing and exits with status 0 on division by
zero; on any other error it writes the message to standard error and exits
with status 1.

For example:

```
$ printf '3\n{[()]}\n{[(])}\n{{[[(())]]}}\n' | drillbook-brackets
YES
NO
YES
```

```
$ echo "3 4 + 2 *" | drillbook-postfix
14
```

```
$ printf '4 2\n1 3 5 7\n4 8\n' | drillbook-search lower
3
-1
```
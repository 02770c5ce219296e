# drillbook

Classic programming drills in plain Python: text patterns, recursion,
counting, array problems, binary search, string puzzles, linked lists,
a stack and a queue, and a small constant-acceleration trajectory
model. It uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command-line tools

### drillbook-patterns

Prints one number pattern. The pattern name is required; the number of
rows is optional and defaults to 5.

```
drillbook-patterns full-pyramid
drillbook-patterns rhombus 7
```

Pattern names: `full-pyramid`, `inverted-left-pyramid`,
`inverted-pyramid`, `inverted-right-half-pyramid`, `left-half-pyramid`,
`rhombus`.

### drillbook-spacecraft

Runs the Earth-to-Mars simulation and prints one line per time step,
`Position: <km> km, Velocity: <km/s> km/s`, until the distance to Mars
is reached.

```
drillbook-spacecraft
drillbook-spacecraft --thrust 50000 --time-step 500
```

Options and their defaults: `--initial-velocity 0.0`,
`--fuel-mass 2000000.0`, `--thrust 35000.0`, `--distance 225000000.0`,
`--time-step 1000.0`. A non-positive fuel mass, thrust, distance or
time step prints `Simulation failed: ...` to standard error and exits
with status 1.

## Modules

| Module | What it holds |
| --- | --- |
| `drillbook.patterns` | `full_pyramid`, `inverted_pyramid`, `left_half_pyramid`, `inverted_left_pyramid`, `inverted_right_half_pyramid`, `rhombus` (each returns the pattern as a string), `main` |
| `drillbook.number_theory` | `binary_representation`, `watermelon`, `count_letters`, `count_values`, `divisors` |
| `drillbook.recursion` | `factorial`, `fibonacci`, `sum_to`, `sum_accumulate`, `count_up`, `count_down`, `repeat_line`, `reversed_string`, `is_palindrome`, `reverse_in_place`, `power`, `power_iterative` |
| `drillbook.spacecraft` | `Spacecraft`, `main` |
| `drillbook.arrays` | `single_occurrences`, `dedupe_sorted`, `majority_element`, `majority_element_counting`, `max_consecutive_ones`, `missing_numbers`, `missing_by_sum`, `first_missing`, `rotate_left_one`, `rotate_left`, `rotate_left_reversal` |
| `drillbook.rearrange` | `move_zeros`, `move_zeros_in_place`, `sort_zero_one_two`, `linear_search`, `sorted_union` |
| `drillbook.sums` | `longest_subarray_with_sum`, `longest_subarray_with_sum_brute`, `two_sum_indices`, `has_two_sum`, `two_pointer_sum` |
| `drillbook.binary_search` | `binary_search`, `binary_search_recursive`, `last_occurrence`, `lower_bound`, `upper_bound`, `search_insert` |
| `drillbook.strings` | `is_anagram`, `largest_odd_prefix`, `remove_outer_parentheses`, `reverse_words` |
| `drillbook.linked_list` | `Node`, `LinkedList` |
| `drillbook.doubly_linked_list` | `DoublyNode`, `DoublyLinkedList` |
| `drillbook.stacks` | `is_valid_brackets`, `Stack`, `Queue` |

## Examples

```python
from drillbook.recursion import factorial, fibonacci
from drillbook.number_theory import divisors
from drillbook.stacks import is_valid_brackets
from drillbook.linked_list import LinkedList

factorial(5)                # 120
fibonacci(10)               # 55
divisors(36)                # [1, 2, 3, 4, 6, 9, 12, 18, 36]
is_valid_brackets("()[{")   # False

numbers = LinkedList.from_iterable([12, 8, 5, 7])
numbers.insert_at_beginning(100)
list(numbers)               # [100, 12, 8, 5, 7]
len(numbers)                # 5
5 in numbers                # True
numbers.delete_tail()       # 7
```

`Stack` and `Queue` have a fixed capacity (1000 and 16 by default).
Pushing onto a full one raises `OverflowError`; popping or peeking an
empty one raises `IndexError`.

The trajectory model takes the initial velocity, fuel mass, thrust and
distance to Mars, and raises `ValueError` for a non-positive fuel mass,
thrust or distance:

```python
from drillbook.spacecraft import Spacecraft

craft = Spacecraft(0.0, 2000000.0, 35000.0, 225000000.0)
trajectory = craft.run_simulation(1000.0)   # list of (position, velocity)
```

## What it does not do

The functions take their input as arguments and return results; apart
from the two commands above, nothing reads from standard input or
prints. The trajectory model is a single constant-acceleration formula:
it has no separate coasting or deceleration phases and takes no account
of gravity.
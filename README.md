# dsakit

A collection of classic algorithm and data-structure routines, plus a few
small object-oriented models of everyday systems: two parking lots, a
restaurant and a process-wide configuration object.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.sequences` | `bubble_sort`, `selection_sort`, `max_subarray`, `missing_number`, `next_greater`, `next_smaller`, `stock_span`, `subarray_with_sum`, `find_celebrity` |
| `dsakit.strings` | `is_rotation`, `is_rotation_naive`, `subsets`, `longest_palindrome`, `reverse_words`, `is_balanced` |
| `dsakit.linked` | `ListNode`, `from_iterable`, `to_list`, `format_list`, `reverse`, `merge_sorted` |
| `dsakit.trees` | `TreeNode`, `inorder`, `level_order`, `height`, `diameter`, `lowest_common_ancestor`, `is_symmetric` |
| `dsakit.graphs` | `GraphNode`, `clone_graph`, `topological_sort` |
| `dsakit.grids` | `count_islands`, `find_word`, `spiral_order`, `rotate_clockwise`, `search_sorted_matrix`, `min_path_cost` |
| `dsakit.backtracking` | `solve_n_queens`, `format_board`, `solve_sudoku`, `maze_paths` |
| `dsakit.parkinglot` | `ParkingTicket`, `SpotPool`, `ParkingLot`, `Vehicle` |
| `dsakit.parkingspace` | `ParkingSpot`, `Vehicle`, `Floor`, `Ticket`, `ParkingGarage`, `decode_slot`, `format_ticket` |
| `dsakit.restaurant` | `MenuItem`, `Order`, `Chef`, `Waiter`, `Restaurant`, `Customer`, `RestaurantError` |
| `dsakit.config` | `GlobalConfig` |

Functions return new values rather than printing. Where nothing fits (no
celebrity, no window with the wanted sum, no sudoku solution, no free parking
spot) the result is `None`; invalid requests such as an empty input to
`max_subarray` or releasing a spot that is not occupied raise `ValueError`.

## Examples

```python
from dsakit.sequences import next_greater, stock_span
from dsakit.strings import is_balanced, longest_palindrome
from dsakit.grids import count_islands
from dsakit.backtracking import maze_paths

next_greater([1, 2, 3, 4, 5])           # [2, 3, 4, 5, -1]
stock_span([10, 4, 5, 90, 120, 80])     # [1, 1, 2, 4, 5, 1]
is_balanced("()[]{}")                   # True
longest_palindrome("forgeekskeegfor")   # "geeksskeeg"

count_islands([
    [1, 1, 0, 0, 0],
    [1, 1, 0, 0, 0],
    [0, 0, 1, 0, 0],
    [0, 0, 0, 1, 1],
])                                      # 3

maze_paths([
    [1, 0, 0, 0],
    [1, 1, 0, 1],
    [1, 1, 0, 0],
    [0, 1, 1, 1],
])                                      # ["DDRDRR", "DRDDRR"]
```

Linked lists and trees are built from plain node objects:

```python
from dsakit.linked import from_iterable, merge_sorted, to_list

merged = merge_sorted(from_iterable([1, 3, 5, 7]), from_iterable([2, 4, 6, 8]))
to_list(merged)                         # [1, 2, 3, 4, 5, 6, 7, 8]
```

The parking and restaurant models take an injectable clock or sleep
function, so they can be driven without waiting in real time:

```python
from dsakit.parkinglot import ParkingLot

now = [0.0]
lot = ParkingLot(clock=lambda: now[0])
ticket = lot.park("bike")               # spot 0
now[0] += 120
lot.release("bike", ticket)             # 20: two minutes at 10 per minute
```

The configuration object is shared across the whole process:

```python
from dsakit.config import GlobalConfig

GlobalConfig.get().set_state(1, 2)
GlobalConfig.get().state()              # (1, 2)
```

## What it does not do

dsakit is a library only: it has no command-line program. The parking,
restaurant and configuration models keep their state in memory and do not
save it anywhere.
# algobox

Classic algorithms, small numeric and text utilities, everyday calculators
and a few console programs, in plain Python with no dependencies beyond the
standard library. Python 3.10 or later is required.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Modules

| Module                 | Contents |
|------------------------|----------|
| `algobox.sorting`      | `bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort`, `quick_sort`, `heapify`, `heap_sort`, `bucket_sort`, `radix_sort` |
| `algobox.searching`    | `linear_search`, `binary_search`, `binary_search_position` |
| `algobox.graphs`       | `Graph` with `add_edge` and `bfs`; `floyd_warshall`, `format_distances`, `INF` |
| `algobox.huffman`      | `HuffmanNode`, `build_huffman_tree`, `huffman_codes` |
| `algobox.backtracking` | `knights_tour`, `solve_n_queens`, `format_board`, `hanoi_moves`, `permutations` |
| `algobox.trees`        | `TreeNode`, `flatten`, `flattened_values` |
| `algobox.dynamic`      | `max_subarray_sum`, `subset_sum`, `lcs_length`, `largest_union_excluding_one` |
| `algobox.numbers`      | `factorial`, `fibonacci`, `fibonacci_series`, `armstrong_numbers`, `count_set_bits`, `is_power_of_two`, `classify_number`, `integer_to_roman`, `binary_to_decimal`, `decimal_to_binary`, `fast_inverse_sqrt`, `is_palindrome_number`, `digit_sum`, `series_sum`, `smallest_and_biggest`, `count_until_multiple_of_ten`, `parity`, `compare_pair` |
| `algobox.text`         | `reverse_string`, `is_vowel`, `classify_triangle`, `parentheses_match`, `count_keyword_lines` |
| `algobox.converters`   | `convert_length`, `convert_pressure`, `circle_measurements`, `calculate`, `showroom_offer`, `note_breakdown`, `analog_time`, `Atm` |
| `algobox.matrix`       | `Matrix` with element-wise `+` and `format` |
| `algobox.clock`        | `render_time`, `format_timestamp` and a large-digit terminal clock |
| `algobox.playlist`     | `Playlist`, a circular playlist with a play cursor |
| `algobox.recipes`      | `Recipe` and `RecipeBook` |
| `algobox.cricket`      | `CricketInnings`, `describe_ball`, `ground_circle` and a text cricket match |
| `algobox.kabaddi`      | `KabaddiMatch` and a text kabaddi match |

A few notes on behaviour:

- The sorting functions take any iterable and return a new ascending list.
  `bucket_sort` accepts only floats in `[0, 1)` and `radix_sort` only
  non-negative integers; both raise `ValueError` otherwise.
- The search functions return `None` when the key is absent.
  `binary_search_position` gives a 1-based position.
- `floyd_warshall` uses `INF` (99999) for "no edge" and returns a new matrix.
- `count_keyword_lines(path)` writes 32 keywords to `path`, one per line,
  and returns the number of lines read back.
- `convert_length` and `convert_pressure` take a menu number from 1 to 12
  (see `LENGTH_CONVERSIONS` and `PRESSURE_CONVERSIONS`) and return a
  `Measurement(value, unit)`. An unknown number raises `ValueError`.
- `Atm.withdraw` raises `InsufficientBalance` when the amount exceeds the
  balance, and otherwise returns the notes paid out.

## Examples

```python
from algobox.numbers import integer_to_roman
from algobox.dynamic import lcs_length, max_subarray_sum
from algobox.graphs import Graph

integer_to_roman(789)                            # 'DCCLXXXIX'
max_subarray_sum([-2, -3, 4, -1, -2, 1, 5, -3])  # 7
lcs_length("abc", "ac")                          # 2

g = Graph(4)
for v, w in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
    g.add_edge(v, w)
g.bfs(2)                                         # [2, 0, 3, 1]
```

```python
from algobox.backtracking import hanoi_moves, solve_n_queens, format_board

hanoi_moves(3, "A", "C", "B")[0]    # (1, 'A', 'C')
print(format_board(solve_n_queens(4)))
# 0 0 1 0
# 1 0 0 0
# 0 0 0 1
# 0 1 0 0
```

```python
from algobox.converters import convert_length
from algobox.matrix import Matrix

convert_length(1, 2.5)              # Measurement(value=2500.0, unit='metre')
print((Matrix([[1, 2], [3, 4]]) + Matrix([[5, 6], [7, 8]])).format())
# 6 8
# 10 12
```

```python
from algobox.playlist import Playlist

playlist = Playlist()
playlist.add("Intro")
playlist.add("Outro")
playlist.next_song()                # 'Outro'
```

## Console programs

Installing the package provides these commands:

```
algobox-clock       # large-digit clock that refreshes every second
algobox-playlist    # interactive playlist menu
algobox-recipes     # interactive recipe book
algobox-cricket     # a short cricket match against the computer
algobox-kabaddi     # kabaddi matches against the computer
```

`algobox-clock` runs until Ctrl+C, or stops after a number of frames given
with `--count N`. `algobox-cricket` and `algobox-kabaddi` accept `--seed N`
to make the dice repeatable. The playlist menu ends on option 9 (or any
choice outside 1 to 8) and the recipe menu on option 4; all menus also end
at end of input.

## Limitations

- Playlists and recipe books are kept in memory only; nothing is saved
  between runs of `algobox-playlist` or `algobox-recipes`.
- The clock clears the screen with ANSI escape codes, so it needs a terminal
  that understands them.
# dsa-drills

Classic data-structure and algorithm exercises written as plain Python,
together with two games you can play in a terminal: Minesweeper and
five-in-a-row noughts and crosses.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Algorithms and data structures

### `dsa_drills.arrays`

- `get_concatenation(nums)` — `nums` followed by a second copy of itself.
- `has_duplicate(nums)` — whether any value occurs more than once.
- `remove_element(nums, val)` — a new list without the occurrences of `val`.
- `encode(strs)` / `decode(s)` — length-prefixed (`<length>#<text>`) encoding
  of a list of strings. `decode` raises `ValueError` on malformed input.
- `group_anagrams(strs)` — anagram groups, ordered by their sorted-letter key.
- `longest_common_prefix(strs)` — `""` for an empty list.
- `top_k_frequent(nums, k)` — the `k` most frequent values, most frequent first.
- `majority_element(nums)` — Boyer-Moore vote for the value occurring more
  than half the time; `ValueError` on an empty sequence.
- `majority_elements(nums)` — values occurring more than `len(nums) // 3` times.
- `product_except_self(nums)`, `longest_consecutive(nums)`,
  `subarray_sum(nums, k)` (count of subarrays summing to `k`),
  `max_profit(prices)` (any number of buy/sell transactions).
- `sort_colors(nums)` — in-place Dutch national flag sort of 0s, 1s and 2s;
  any other value raises `ValueError`.
- `is_valid_sudoku(board)` — `'.'` marks an empty cell.
- `NumMatrix(matrix)` — 2-D prefix sums; `sum_region(row1, col1, row2, col2)`
  returns the inclusive rectangle sum, raising `IndexError` for a region
  outside the matrix.

```python
from dsa_drills.arrays import NumMatrix, decode, encode

assert decode(encode(["neet", "code"])) == ["neet", "code"]

m = NumMatrix([[1, 2], [3, 4]])
m.sum_region(0, 0, 1, 1)  # 10
```

### `dsa_drills.hashing`

Hand-built integer hash tables. The sets support `add`, `remove` and `in`.

- `BoolTableSet` — direct-address table for keys `0` to `1_000_000`; `add`
  and `remove` raise `ValueError` for keys outside that range.
- `ChainedHashSet` — separate chaining over 1009 buckets.
- `OpenAddressingHashSet` — linear probing over 20011 slots; `add` raises
  `OverflowError` when the table is full.
- `ChainedHashMap` — `put(key, value)`, `get(key)` (returns `-1` for a
  missing key) and `remove(key)` (raises `KeyError` for a missing key).

### `dsa_drills.sliding_window`

- `find_anagrams(s, p)` — start indices of substrings of `s` that are
  anagrams of `p`.
- `find_max_average(nums, k)` — best average of a window of exactly `k`
  elements; `ValueError` if `k` is not between 1 and `len(nums)`.

### `dsa_drills.two_pointers`

- `max_area(height)` — container with the most water.
- `trap(height)` and `trap_prefix(height)` — trapped rain water, with two
  pointers and with prefix/suffix maxima.
- `three_sum(nums)` — distinct ascending triplets summing to zero.
- `reverse_string(chars)` — reverses a list of characters in place.
- `is_palindrome(s)` — case-insensitive, ignoring spaces.
- `merge_alternately(word1, word2)` — interleaves two words.

### `dsa_drills.linked_list`

- `SinglyLinkedList(values=())` with `push_back`, `push_front`,
  `insert(index, value)`, `erase(index)` and `clear`. Iteration, `len()` and
  `str()` (`"1 -> 2 -> NULL"`) are supported; `insert` and `erase` raise
  `IndexError` for positions out of range.
- `DoublyLinkedList` with `append`, `clear`, `len()`, forward iteration and
  `reversed()`.

### `dsa_drills.tree`

- `TreeNode`, `insert(root, value)` (returns the root; equal values go right)
  and `inorder(root)`, a generator of values in ascending order.

## Games

### Minesweeper

```
dsa-minesweeper
dsa-minesweeper --seed 42
```

Choose a level (1 Easy 9×9 with 10 mines, 2 Normal 16×16 with 40, 3 Hard
24×24 with 99, 4 Exit), then enter moves as `row col`. Opening a cell with no
neighbouring mines opens the area around it. `--seed` makes mine placement
repeatable.

From code, `dsa_drills.minesweeper.Minesweeper(rows, cols, mines, rng=None)`
offers `reveal(row, col)` (returns `False` when a mine is hit),
`adjacent_mines(row, col)`, `is_won()`, `render()`, the `mines` property and
the `lost` flag. `Difficulty` holds the three presets.

### Five-in-a-row

```
dsa-tictactoe
```

Enter the board size (at least 5 × 5), then for each move the mark (for
example `X` or `O`) and `row col`. Five marks in a line — horizontal,
vertical or either diagonal — win; a full board is a draw.

From code, `dsa_drills.tictactoe.Board(rows, cols)` offers
`play(row, col, mark)` (returns the winning direction or `None`, and raises
`MoveError` for an invalid move), `is_full()` and `render()`.

## Limitations

The games are plain text in a terminal. Minesweeper has no flagging of
suspected mines, and neither game keeps scores or saves games.
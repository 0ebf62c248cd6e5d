# algolab

A set of classic algorithms and hand-built container types for Python 3.10 and later. It has no runtime dependencies.

## Modules

### Algorithms

- `algolab.arrays`: array, search and matrix routines.
  - Array problems: `max_area`, `longest_consecutive`, `three_sum`, `rotate` (in place), `two_sum`, `product_except_self`, `max_sliding_window`, `trap`, `max_subarray`, `subarray_sum` and `merge_intervals`.
  - Matrix routines: `search_matrix`, `spiral_order` and `set_zeroes` (in place).
  - Binary search: `search_rotated`, `search_range` and `search_insert`.
  - Parsers for bracketed text: `parse_int_list("[1, -2, 3]")` and `parse_matrix("[[1,2],[3,4]]")`. Both stop reading at the first stray character.
- `algolab.strings`: string routines.
  - `decode_string` expands `k[text]` groups. It raises `ValueError` on unbalanced brackets.
  - `length_of_longest_substring`, `find_anagrams`, `group_anagrams` (which keeps first-seen order) and `min_window`.
  - `parse_word_list("[eat, tea, tan]")` reads a bracketed list of words.
- `algolab.linked_list`: a singly linked list.
  - The node type is the dataclass `ListNode`, which is iterable over its values.
  - Conversions: `from_values` and `to_values`.
  - Operations: `sort_values_in_place`, `find_middle`, `merge_two_lists`, `sort_list` (merge sort that relinks the nodes), `reverse_list`, `swap_pairs`, `reverse_k_group` and `add_two_numbers`.
- `algolab.sorting`: in-place sorts over mutable sequences.
  - `heap_sort` and `heap_sort_descending`.
  - `merge_sort`.
  - `quick_sort`, plus the `partition` step it uses.
- `algolab.tree`: binary trees.
  - `TreeNode` is the node type.
  - `build_tree` takes a level-order list in which `-1` or `None` marks a missing node.
  - `level_order` returns the values level by level, with `-1` for each missing child. `format_levels` renders the same listing as text, one line per level.
- `algolab.hanoi`: Towers of Hanoi.
  - `hanoi` solves it recursively. `hanoi_iterative` does the same with an explicit stack of frames.
  - Both return the number of moves. Both accept an optional `on_move(source, target)` callback.
- `algolab.lru`: `LRUCache(capacity)` with `get` and `put`. `get` returns `-1` for a missing key. When the cache is full, `put` evicts the least recently used entry.

### Containers and helpers

- `algolab.vector.Vector`: a growable sequence that tracks its reserved capacity.
  - It is created as `Vector()`, `Vector(n)`, `Vector(n, value)` or `Vector(iterable)`.
  - Methods: `push_back`, `emplace_back`, `pop_back`, `insert`, `emplace`, `erase`, `assign`, `resize`, `reserve`, `shrink_to_fit`, `at`, `front`, `back`, `swap`, `clear` and `copy`.
  - `capacity()` reports the reserved capacity. When growing, it at least doubles.
- `algolab.fixed_array.FixedArray`: an array with a fixed number of slots.
  - Methods: `at`, `fill`, `swap` (same size only), `front`, `back`, `empty` and `size`.
  - `array_of(*values)` builds one sized to its arguments.
- `algolab.linked.LinkedList`: a circular doubly linked list built around a sentinel node.
  - End operations: `push_back`, `push_front`, `pop_front` and `pop_back`.
  - Positional operations: `insert`, `erase` and `splice`.
  - Removal by value: `remove` and `remove_if`.
  - Also `assign`, `clear` and `copy`, plus forward and reverse iteration.
- `algolab.pointers`: owning handles.
  - `UniquePtr` is the single-owner handle. Its methods are `get`, `release`, `reset` and `take`, and it is also a context manager. By default it closes its value when disposing of it.
  - `make_unique` builds a value and wraps it in a `UniquePtr`.
  - `SharedPtr` is the reference-counted handle. Its methods are `copy`, `assign`, `use_count`, `unique`, `swap` and `release`.
  - `Person` is a small record whose `info()` returns `"Name: ..., Age:..."`.
- `algolab.function.Function`: a wrapper around any callable. Calling an empty one raises `RuntimeError`.
- `algolab.cstring`: NUL-terminated string operations on `bytearray` buffers.
  - `strcpy`, `strcat`, `strcmp` (returns `-1`, `0` or `1`) and `memcpy`.
  - `strstr` returns an offset or `None`.
  - A buffer that is too small raises `ValueError`.

## Examples

```python
from algolab.arrays import max_area, search_range
from algolab.strings import min_window
from algolab.lru import LRUCache

max_area([1, 8, 6, 2, 5, 4, 8, 3, 7])   # 49
search_range([5, 7, 7, 8, 8, 10], 8)    # [3, 4]
min_window("ADOBECODEBANC", "ABC")      # "BANC"

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)      # 1
cache.put(3, 3)   # evicts key 2
cache.get(2)      # -1
```

```python
from algolab.pointers import Person, SharedPtr

first = SharedPtr(Person(10, "zhangsan"))
second = first.copy()
first.use_count()   # 2
second.get().info() # "Name: zhangsan, Age:10"
```

## Command line

The package installs one command, `algolab-hanoi`. It solves the Towers of Hanoi, moving the discs from peg A to peg B with C as the spare. It prints every move and then the total number of moves:

```
algolab-hanoi            # 4 discs
algolab-hanoi 6          # 6 discs
algolab-hanoi 6 --iterative
```

## Limits

Apart from `algolab-hanoi`, everything here is a library. The array, string, list and tree routines cannot be run as commands that read input from standard input. To use bracketed text as input, call the parsers (`parse_int_list`, `parse_matrix`, `parse_word_list`) yourself.

## Running the tests

```
pip install -e ".[test]"
pytest
```
# chaincoll

A small library of plain container types with explicit, predictable behaviour.
It has no dependencies outside the standard library.

## Modules

- `chaincoll.common`: the comparison and hash functions (`default_cmp`,
  `default_hash`, `address_hash`, `str_hash_simple`, `str_hash_bkdr`), the error
  types, `TraverseDirection`, `MapItem`, and the abstract interfaces `Stack`,
  `Queue` and `Map`.
- `chaincoll.array`: `Array`, a fixed-size array with range-checked access
  (`get`, `set`, indexing), `swap`, `compare` and `reverse`.
- `chaincoll.array_sort`: `sort_bubble` and `sort_quick`, which sort an `Array`
  in place using a three-way comparison function.
- `chaincoll.array_stack`: `ArrayStack`, a stack of fixed capacity with `space()`.
- `chaincoll.ring`: `Ring`, a first-in, first-out ring buffer of fixed capacity
  with `space()`.
- `chaincoll.linked_list`: `LinkedList`, a doubly linked list, and `ListCursor`,
  which reads, inserts and removes elements relative to a position in the list.
- `chaincoll.list_queue` / `chaincoll.list_stack`: `ListQueue` and `ListStack`,
  an unbounded queue and stack backed by `LinkedList`.
- `chaincoll.array_chain`: `ArrayChain`, an append-only sequence stored in
  fixed-size blocks, copied out with `to_array(reserve)`.
- `chaincoll.string_builder`: `StringBuilder` and `concat`.
- `chaincoll.list_map`: `ListMap`, a map searched linearly with a comparison function.
- `chaincoll.hash_map`: `HashMap`, a map with a fixed number of buckets, each a
  `ListMap`, taking a custom comparison function and a custom hash function.
- `chaincoll.binary`: `BinaryNode`, a binary tree node with insertion, rotation,
  printing (`dump`) and depth-first or breadth-first traversal (`traverse`).

Errors are raised as exceptions derived from `chaincoll.common.ContainerError`:
`EmptyError`, `FullError`, `KeyNotFoundError` and `KeyExistsError` (the last two
are also `KeyError`s). `chaincoll.linked_list` adds `CursorMoveError`,
`CursorGetError` and `RemovingCurrentError`.

## Installation

```
pip install .
```

## Examples

```python
from chaincoll.ring import Ring
from chaincoll.common import FullError

ring = Ring(2)
ring.enqueue("a")
ring.enqueue("b")
try:
    ring.enqueue("c")
except FullError:
    pass
assert ring.dequeue() == "a"
```

```python
from chaincoll.hash_map import HashMap
from chaincoll.common import str_hash_bkdr

scores = HashMap(20, None, str_hash_bkdr)
scores.set("lazy_dog", 1)
scores.set("quick_fox", 2)
assert scores.get("quick_fox") == 2
item = scores.delete("lazy_dog")
assert item.value == 1
```

```python
from chaincoll.linked_list import LinkedList, ListCursor

items = LinkedList([0, 1, 2, 3])
cursor = ListCursor(items)  # a new cursor stands at the end
cursor.reset()              # now on the first element
assert cursor.get(0, 2) == [0, 1]
cursor.move(2)
assert cursor.remove(-1, 1) == [1]
assert list(items) == [0, 2, 3]
```

```python
from chaincoll.binary import BinaryNode
from chaincoll.common import TraverseDirection

root = BinaryNode(1)
root.insert_left(2)
root.insert_right(3)
assert list(root.traverse(TraverseDirection.BREADTH_LEFT)) == [1, 2, 3]
```

```python
from chaincoll.string_builder import StringBuilder, concat

builder = StringBuilder()
builder.append("abcdef", 3)
builder.append_str("ghi")
assert builder.to_string() == "abcghi"
assert concat("abc", "def") == "abcdef"
```

The `dump` methods of `ListMap`, `HashMap` and `BinaryNode` write their text to
standard output and also return it.

## What it does not do

This is a library only: it has no command-line program, and its containers live
in memory with no storage to disk.

## Running the tests

```
pip install .[test]
pytest
```
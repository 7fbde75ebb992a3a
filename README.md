# collectkit

collectkit is a small set of general-purpose containers. Each container
has a capacity policy that you can configure. Most containers also have
an iterator that can change the container while you walk through it.

- `Array` (`collectkit.array`) is a growable array. When it is full, its
  capacity grows by an expansion factor.
- `Deque` (`collectkit.deque`) is a double-ended queue. Its capacity is
  always a power of two, and it doubles when the queue is full.
- `HashTable` (`collectkit.hashtable`) is a hash table that resolves
  collisions by chaining. You configure it with `HashTableConf`, which
  sets the hash function, the key comparison, the initial capacity, the
  load factor, the key length and the hash seed.
- `HashSet` (`collectkit.hashset`) is a set built on `HashTable`. It
  takes the same configuration, which is also available as `HashSetConf`.

The iterators are:

- `ArrayIter` and `ArrayZipIter`, in `collectkit.array_iter`.
- `DequeIter` and `DequeZipIter`, in `collectkit.deque_iter`.
- `HashTableIter`, in `collectkit.hashtable`.
- `HashSetIter`, in `collectkit.hashset`.

The array and deque iterators can remove, add and replace elements during
iteration. The hash table and hash set iterators can remove the current
entry.

## Installation

```
pip install collectkit
```

collectkit has no runtime dependencies.

## Usage

### Array

```python
from collectkit.array import Array
from collectkit.array_iter import ArrayIter

arr = Array()
for n in (3, 1, 2):
    arr.add(n)

arr.add_at(10, 1)          # [3, 10, 1, 2]
arr.remove_at(0)           # returns 3
arr.sort(lambda a, b: (a > b) - (a < b))
print(arr.to_list())       # [1, 2, 10]

it = ArrayIter(arr)
for value in it:
    if value == 2:
        it.remove()
print(arr.to_list())       # [1, 10]
```

`ArrayIter.remove` does not move the cursor back. The element that
followed the removed one is therefore skipped in that pass.
`DequeIter.remove` does move the cursor back, so `DequeIter` skips
nothing.

Some lookups compare elements by identity (`is`):

- `Array.index_of`, `Array.contains` and `Array.remove`.
- The matching `Deque` methods.

`contains_value` compares elements with a three-way comparator that you
pass in.

`Array.reduce(fn)` folds the array from the left. An array with one
element gives `fn(element, None)`. An empty array gives `None`.

### Deque

```python
from collectkit.deque import Deque

d = Deque()
d.add_last("b")
d.add_first("a")
d.add_last("c")
print(d.get_first(), d.get_last())   # a c
print(d.capacity())                  # 8
```

`Deque.add_at` accepts only an index inside the deque. To append at the
end, use `add_last`.

### HashTable and HashSet

```python
from collectkit.hashtable import HashTable, HashTableConf
from collectkit.hashset import HashSet

table = HashTable()
table.add("key", "value")
print(table.get("key"))              # value
print(table.contains_key("missing")) # False

conf = HashTableConf(initial_capacity=7)
print(HashTable(conf).capacity())    # 8, rounded up to a power of two

s = HashSet()
for word in ("foo", "bar", "foo"):
    s.add(word)
print(len(s))                        # 2
```

With the default configuration, keys are strings. They are hashed with
`hash_string` and compared with `collectkit.common.compare_str`.

`None` is allowed as a key.

`HashTable.keys()` and `HashTable.values()` return an `Array`. They raise
`InvalidCapacityError` if the table is empty.

The iteration order of a table or set is unspecified.

## Errors

When an operation fails, it raises an exception that is a subclass of
`collectkit.common.CollectionError`. Each exception also derives from a
built-in exception:

| Exception              | Also derives from |
|------------------------|-------------------|
| `OutOfRangeError`      | `IndexError`      |
| `InvalidRangeError`    | `ValueError`      |
| `ValueNotFoundError`   | `ValueError`      |
| `KeyNotFoundError`     | `KeyError`        |
| `InvalidCapacityError` | `ValueError`      |
| `MaxCapacityError`     | `OverflowError`   |

## Hash functions

`collectkit.hashing` provides three hash functions. You can pass any of
them as `HashTableConf.hash`.

- `hash_string(key, length, seed)` is a djb2-style hash of a string. The
  string ends at its first NUL. This is the default.
- `hash_bytes(key, length, seed)` returns the first 64 bits of
  MurmurHash3 x64-128, taken over `length` bytes of the key. A negative
  length or `None` hashes the whole key.
- `hash_identity(key, length, seed)` hashes an object's identity. For an
  integer, the identity is the integer itself. For any other object, it
  is the object's `id`.

`collectkit.common.round_pow_two(n)` rounds up to a power of two. The
hash table and the deque use it to size themselves.

## What it does not do

The containers live in memory only. They do not persist data, they do not
lock against concurrent use, and they have no command-line interface.

## Running the tests

```
pip install -e ".[test]"
pytest
```
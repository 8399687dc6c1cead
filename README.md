# stlkit

Containers and algorithms in the style of a standard template library:
iterator-based sorting and searching, a double-ended queue, doubly and singly
linked lists, ordered maps, a priority queue, a bitmap, a bloom filter, a hash
array mapped trie and a consistent-hash ring.

The only runtime dependency is `sortedcontainers`, used by the ordered maps.
The test suite uses `pytest`, available through the `test` extra.

## Modules

| Module                  | Contents |
|-------------------------|----------|
| `stlkit.algorithm`      | `builtin_compare`, `reverse_compare`, `count`, `count_if`, `find`, `find_if`, `max_element`, `min_element`, `swap`, `reverse` |
| `stlkit.sorting`        | `sort`, `stable_sort`, `nth_element`, `next_permutation`, `binary_search`, `lower_bound`, `upper_bound` |
| `stlkit.hashing`        | `hash512`, `gen_hash_ints` |
| `stlkit.array`          | `Array`, `ArrayIterator`: a fixed-size array |
| `stlkit.deque`          | `Deque`, `DequeIterator`: a double-ended queue with random access |
| `stlkit.bidlist`        | `LinkedList`, `Node`, `ListIterator`: a circular doubly linked list |
| `stlkit.simplelist`     | `SimpleList`, `Node`, `ListIterator`: a singly linked list |
| `stlkit.queue`          | `Queue`: FIFO over a `Deque` (default) or a `LinkedList` (`Queue.with_list()`) |
| `stlkit.treemap`        | `TreeMap`, `MultiMap`, `MapIterator`: ordered maps |
| `stlkit.priorityqueue`  | `PriorityQueue`: a binary heap with a custom comparator |
| `stlkit.bitmap`         | `Bitmap`: a bit array whose size is a multiple of eight |
| `stlkit.bloom`          | `BloomFilter`, `estimate_parameters` |
| `stlkit.hamt`           | `Hamt`: a hash array mapped trie keyed by bytes (strings are UTF-8 encoded) |
| `stlkit.ketama`         | `Ketama`: a consistent-hash ring |

## Comparators and iterators

Comparators are functions `cmp(a, b)` returning a negative number, zero or a
positive number. `builtin_compare` is the default everywhere one is accepted,
and `reverse_compare(cmp)` flips the order of any comparator.

Ranges are half-open, `[first, last)`. Iterators move with `next()` and
`prev()`, copy with `clone()`, compare with `==`, and expose the element
through the `value` property, which can also be assigned. `ArrayIterator` and
`DequeIterator` additionally have `position` and `iterator_at(pos)`, which the
functions in `stlkit.sorting` require. `MapIterator` also has a `key` property.

## Examples

Sorting a deque in place through its iterators:

```python
from stlkit.deque import Deque
from stlkit.sorting import sort, lower_bound

d = Deque()
for v in (5, 1, 4, 3, 7):
    d.push_back(v)
sort(d.begin(), d.end())
print(d)                                          # [1 3 4 5 7]
print(lower_bound(d.begin(), d.end(), 4).value)   # 4
```

An ordered map:

```python
from stlkit.treemap import TreeMap

m = TreeMap()
for i in range(10):
    m.insert(i, i * 10)
it = m.upper_bound(6)
print(it.key, it.value)                   # 7 70
print(3 in m, len(m))                     # True 10
```

A max priority queue:

```python
from stlkit.algorithm import reverse_compare
from stlkit.priorityqueue import PriorityQueue

pq = PriorityQueue(reverse_compare())
for v in (4, 8, 1):
    pq.push(v)
print(pq.pop(), pq.top())                 # 8 4
```

A bloom filter that can be saved and restored:

```python
from stlkit.bloom import BloomFilter

bf = BloomFilter.with_estimates(100_000, 0.0001)
bf.add("alpha")
restored = BloomFilter.from_data(bf.data())
print("alpha" in restored)                # True
```

A consistent-hash ring:

```python
from stlkit.ketama import Ketama

ring = Ketama(replicas=7)
ring.add("node-a", "node-b", "node-c")
node = ring.get("some-key")               # one of the node names, or None if the ring is empty
```

## Errors and edge cases

Most lookups outside the valid range give `None` rather than raising:
`Array.at`, `Deque.at`, `Deque.front`, `Deque.pop_front` and the like.
The exceptions are `Deque.set`, which raises `IndexError` for an out-of-range
position, `PriorityQueue.pop`, which raises `IndexError` on an empty queue, and
reading `key` or `value` from an invalid `MapIterator`, which raises
`ValueError`.

## Thread safety

`Queue`, `TreeMap`, `MultiMap`, `PriorityQueue`, `BloomFilter`, `Hamt` and
`Ketama` accept `thread_safe=True`, which guards their operations with a lock.
Iterators are not guarded and should not be shared between threads.

## What it does not do

This is a library only: it has no command-line tool. Apart from
`Bitmap.data()` and `BloomFilter.data()`, which return bytes that
`from_data` can rebuild from, nothing is saved to or loaded from storage.
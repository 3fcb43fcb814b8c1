# memadt

`memadt` is a small library with two parts:

* **A simulated memory manager.** `memadt.memmgr.MemMgr` hands out
  integer addresses from fixed-size memory blocks, rounds every request
  up to a multiple of the word size (`SIZE_T`, 8 bytes), and keeps freed
  chunks in recycle lists indexed by array size so that later requests
  of the same size reuse them. `memadt.memtest.MemTest` drives it with
  lists of objects and arrays of objects.
* **Container ADTs.** `memadt.array.Array` (a dynamic array whose
  removals move the last element into the hole), `memadt.dlist.DList`
  (a circular doubly linked list that keeps insertion order) and
  `memadt.bst.BSTree` (an unbalanced binary search tree that keeps
  duplicates and iterates in ascending order). `memadt.adttest.AdtTest`
  exercises any of them with short strings held in `AdtTestObj`.

Supporting modules:

* `memadt.strutil` – case-insensitive word matching with a mandatory
  prefix (`str_ncmp`), tokenising (`get_token`), strict integer parsing
  (`parse_int`, raising `ValueError`) and identifier checks
  (`is_valid_var_name`).
* `memadt.util` – a seedable `RandomNumGen`, a CPU-time and memory
  `Usage` reporter, `list_dir`, `hash_size` and `remove_data`.
* `memadt.getchar` – `get_char`, reading one key press without echo
  when the stream is a terminal, raising `EOFError` at end of input.

The package needs Python 3.10 or later and has no third-party
dependencies.

## Containers

All three containers share one interface: `len()`, forward and
reversed iteration, `pop_front`, `pop_back`, `erase` by value,
`erase_at` by position, `find` (returning an index or `None`), `clear`
and `sort`. `Array` and `DList` add items with `push_back`; `BSTree`
adds them with `insert` and can draw its shape with `print_tree`.

```python
from memadt.array import Array
from memadt.dlist import DList
from memadt.bst import BSTree

arr = Array()
for word in ["pear", "apple", "fig"]:
    arr.push_back(word)
arr.sort()
print(list(arr))          # ['apple', 'fig', 'pear']

lst = DList()
for word in ["pear", "apple", "fig"]:
    lst.push_back(word)
lst.erase("apple")
print(list(reversed(lst)))  # ['fig', 'pear']

tree = BSTree()
for word in ["pear", "apple", "fig"]:
    tree.insert(word)
print(list(tree))         # ['apple', 'fig', 'pear']
tree.pop_back()           # removes the largest item
```

## Memory manager

```python
import io
from memadt.memmgr import MemMgr, to_size_t

print(to_size_t(7))       # 8

mgr = MemMgr(65536, 84)   # block size in bytes, object size in bytes
address = mgr.alloc(84)
mgr.free(address)         # goes to recycle list 0
again = mgr.alloc(84)     # the same address, reused from the recycle list

out = io.StringIO()
mgr.report(out)
print(out.getvalue())
```

A request larger than the block size raises `MemoryError`. `reset()`
drops all but one block and every recycle list; `reset(block_size)`
also sets a new block size.

`MemTest` keeps a list of objects and a list of arrays:

```python
import io
from memadt.memtest import MemTest

mtest = MemTest(65536)
mtest.new_objs(10)
mtest.new_arrs(3, 4)      # three arrays of four objects each
mtest.delete_obj(0)
mtest.delete_arr(1)

out = io.StringIO()
mtest.report(out)         # manager statistics and 'o'/'x' slot maps
print(out.getvalue())
```

## ADT test bench

```python
import io
from memadt.adttest import AdtTest, AdtTestObj
from memadt.util import RandomNumGen

adt = AdtTest("bst", RandomNumGen(1))   # "array", "dlist" or "bst"
adt.add(AdtTestObj("hello"))
adt.add()                               # a random five-letter string
print(adt.find(AdtTestObj("hello")))    # True

out = io.StringIO()
adt.print(out, reverse=True)
print(out.getvalue())
```

`AdtTestObj` truncates its text to a class-wide length limit (5 by
default), changed with `AdtTestObj.set_len` or `AdtTest.reset`.

## What the package does not do

There is no interactive command prompt and no command-line program:
the memory manager and the containers are driven by calling `MemTest`
and `AdtTest` methods from Python. Named commands with option parsing
and error reporting, history and script files are not provided.
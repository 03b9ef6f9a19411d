# dsbasics

Small, readable implementations of the classic data structures, each in its
own module:

| Module                         | What it holds                                          |
|--------------------------------|--------------------------------------------------------|
| `dsbasics.bst`                 | `BST`, an unbalanced binary search tree of integers    |
| `dsbasics.graph`               | `Graph`, an undirected graph on an adjacency list      |
| `dsbasics.hashtable`           | `HashTable`, seven chained buckets, and `hash_key`     |
| `dsbasics.stacks_queues`       | `Stack` and `Queue` of integers                        |
| `dsbasics.doubly_linked_list`  | `DoublyLinkedList` with 1-based positions              |
| `dsbasics.singly_linked_list`  | `LinkedList` with 0-based positions                    |

Every structure has a `render()` method that returns its text picture, so you
can print it or compare it in a test.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Using it

### Binary search tree

```python
from dsbasics.bst import BST

tree = BST(10)
for value in (15, 8, 13, 16, 9, 7):
    tree.insert(value)

tree.contains(13)    # True
-9 in tree           # False
list(tree)           # [7, 8, 9, 10, 13, 15, 16]
print(tree.render()) # right subtree on top, four spaces per level
```

Values equal to a node go into its left subtree, so duplicates are kept.

### Graph

```python
from dsbasics.graph import Graph

graph = Graph()
graph.add_vertex("Kiro")   # True; False if the vertex was already there
graph.add_vertex("Dodo")
graph.add_edge("Kiro", "Dodo")
graph.neighbours("Kiro")   # frozenset({'Dodo'})
graph.remove_vertex("Dodo")
graph.vertices()           # ['Kiro']
print(graph.render())      # "1: Kiro"
```

`add_edge` raises `KeyError` when either vertex has not been added;
`remove_edge` returns `False` in that case.

### Hash table

```python
from dsbasics.hashtable import HashTable, hash_key

table = HashTable()
table.set("Kiro", 1)
table.set("Mrmr", 2)
hash_key("Mrmr")     # bucket index, 1 to 6, from the sum of character codes
table.find("Mrmr")   # (bucket index, 1-based position in the bucket)
table.get("Mrmr")    # 2
print(table.render())
```

Setting a key again appends another entry rather than replacing the first;
`get` returns the value of the first entry. `find` and `get` raise `KeyError`
for a missing key.

### Stack and queue

```python
from dsbasics.stacks_queues import Stack, Queue

stack = Stack(5)
stack.push(4)
stack.pop()       # 4

queue = Queue(5)
queue.enqueue(6)
queue.dequeue()   # 5
```

`pop` and `dequeue` raise `IndexError` when empty.

### Linked lists

```python
from dsbasics.doubly_linked_list import DoublyLinkedList
from dsbasics.singly_linked_list import LinkedList

dll = DoublyLinkedList(5)
dll.append(10)
dll.prepend(0)
dll.insert(2, 3)        # [0, 3, 5, 10]
dll.swap_first_last()   # [10, 3, 5, 0]
dll.get_by_value(5)     # first node holding 5, or None
print(dll.render())

sll = LinkedList(5)
sll.append(10)
sll.append(15)
sll.find_middle().value # 10
print(sll.render())
```

Positions out of range raise `IndexError`, as does deleting from an empty list.

## Demonstrations

Each module carries a short demonstration that builds a structure and prints
it as it goes:

```
dsbasics-bst
dsbasics-graph
dsbasics-hashtable
dsbasics-stacks-queues
dsbasics-dll
dsbasics-sll
```

## What it does not do

The structures live in memory only; nothing is saved. The tree has no
deletion, and the hash table has a fixed seven buckets with no removal or
resizing.
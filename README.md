# stackkit

Small data structures in pure Python, with no dependencies:

- `ArrayStack` (`stackkit.array_stack`): a stack that holds at most five items.
  `push` returns `False` instead of adding when the stack is full.
- `VecStack` (`stackkit.vec_stack`): an unbounded stack backed by a Python list.
- `LinkedStack` (`stackkit.linked_stack`): a stack built from linked nodes. It
  can be iterated top first, and `drain()` pops items one at a time.
- `PersistentList` (`stackkit.persistent_list`): an immutable list. `prepend`
  and `tail` return new lists that share nodes with the old one.
- `SinglyLinkedList` (`stackkit.singly_linked_list`): a linked list with front
  and back operations, insertion after an element, removal, search,
  membership tests and `keys()`, which joins the elements with `->`.
- `IoTDevice` and `DeviceRegistry` (`stackkit.device_registry`): a character
  trie that stores devices under their path.

On every stack and list, `pop`, `peek` and similar lookups return `None` when
there is nothing to return. `replace_top` (and `replace_front` on
`SinglyLinkedList`) raises `IndexError` when the stack is empty.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Usage

```python
from stackkit.array_stack import ArrayStack

stack = ArrayStack()
for n in range(1, 6):
    stack.push(n)
stack.push(6)        # False: the stack is full
stack.is_full()      # True
stack.peek()         # 5
stack.pop()          # 5
len(stack)           # 4
```

```python
from stackkit.linked_stack import LinkedStack

stack = LinkedStack()
for n in (1, 2, 3):
    stack.push(n)
list(stack)          # [3, 2, 1], stack unchanged
list(stack.drain())  # [3, 2, 1], stack now empty
stack.pop()          # None
```

```python
from stackkit.persistent_list import PersistentList

base = PersistentList().prepend(1).prepend(2)
longer = base.prepend(3)
list(longer)         # [3, 2, 1]
list(base)           # [2, 1], unchanged
longer.tail().head() # 2
```

```python
from stackkit.singly_linked_list import SinglyLinkedList

items = SinglyLinkedList()
for value in ("1", "2", "3"):
    items.push_front(value)
items.insert("2", "55")
items.keys()         # "3->2->55->1"
"55" in items        # True
items.remove("55")   # "55"
items.pop_back()     # "1"
```

`insert(left_elem, new_elem)` puts `new_elem` right after the first element
equal to `left_elem` and returns `True`; it returns `False` when nothing
matches. On an empty list it adds `new_elem` as the only element. When the
matching element is the last one, nothing is inserted, though the call still
returns `True`.

```python
from stackkit.device_registry import DeviceRegistry, IoTDevice

registry = DeviceRegistry()
registry.add(IoTDevice(1, "192.0.2.1", "home/lamp"))
registry.find("home/lamp")   # a copy of the stored device
registry.walk(print)         # calls print for every stored device
len(registry)                # 1
```

Two `IoTDevice` values are equal when their `numerical_id` and `address` match;
the path is not compared. A device with an empty path is ignored by `add`.
Every added device counts toward `len`, including one that replaces an earlier
device at the same path. `find` follows the path as far as the trie goes and
returns the device at the deepest node it reached, or `None`. `walk` visits
children before their parents.

## Running the tests

```
pytest
```
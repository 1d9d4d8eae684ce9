# inkrt

Building blocks for running compiled ink stories: the command set, the
binary header reader, and the collections that give a runtime its
save/restore behaviour (needed to look past the end of a line for glue).

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `inkrt.core` | `Command`, `CommandFlag`, `command_num_args`, `ListFlag`, `Header`, `Endian`, `swap_bytes`, `is_whitespace`, `is_part_of_word`, `InkError`, runtime limit constants |
| `inkrt.random` | `Prng`, a linear congruential generator |
| `inkrt.array` | `ManagedArray`, `RestorableArray`, `AllocatedRestorableArray` |
| `inkrt.avl` | `AvlArray`, a bounded ordered map backed by an AVL tree |
| `inkrt.restorable` | `Restorable`, a stack with save / restore / forget |
| `inkrt.stack` | `SimpleRestorableStack` |
| `inkrt.strings` | `to_str`, `decimal_digits`, `value_length`, `str_equal`, `clean_string` |
| `inkrt.tags` | `TagList` |
| `inkrt.inkvar` | `InkVar`, `InkVarType` |

## Examples

How many stack arguments an operator takes:

```python
from inkrt.core import Command, command_num_args

command_num_args(Command.ADD)         # 2
command_num_args(Command.NOT)         # 1
command_num_args(Command.LIST_RANGE)  # 3
command_num_args(Command.STR)         # 0
```

Reading a list flag from binary data; the call returns the flag and the
offset just after it:

```python
from inkrt.core import Endian, Header

header = Header(endian=Endian.SAME)
flag, offset = header.read_list_flag(data, 0)
```

Deterministic random numbers:

```python
from inkrt.random import Prng

rng = Prng()
rng.srand(42)
roll = rng.rand(6)   # 0 <= roll < 6
```

Saving and rolling back a stack while peeking ahead:

```python
from inkrt.stack import SimpleRestorableStack

stack = SimpleRestorableStack(null=None)
stack.push(1)
stack.save()
stack.pop()
stack.push(2)
stack.restore()      # back to [1]
stack.top()          # 1
```

An ordered map with a fixed capacity (inserting past it raises `InkError`):

```python
from inkrt.avl import AvlArray

tree = AvlArray(8)
tree.insert(3, "c")
tree.insert(1, "a")
list(tree.keys())        # [1, 3]
tree.get(2, "missing")   # "missing"
```

Formatting values for output:

```python
from inkrt.strings import clean_string, to_str

to_str(2.5)                              # "2.5"
clean_string("a  b\n\n c", False, True)  # "a b\nc"
```

Tags on a line:

```python
from inkrt.tags import TagList

tags = TagList(["speaker: Ann", "loud"])
tags.has("loud")           # True
tags.get_value("speaker")  # "Ann"
```

Values handed to and from external functions:

```python
from inkrt.inkvar import InkVar

InkVar.of(3).as_int()      # 3
InkVar.of(True).as_bool()  # True
InkVar.of("x").as_int()    # 0, and a warning is logged
```

Invalid operations (popping an empty stack, saving twice, indexing out of
range, pushing the null value) raise `inkrt.core.InkError`.

## What this package does not do

It does not load compiled story files and does not execute stories: there
is no interpreter, no runner, no choice handling and no globals store. It
provides the pieces such a runtime is built from.
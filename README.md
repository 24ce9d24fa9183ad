# satlink

satlink reads a list of satellites and their frequencies and joins them into a
binary link tree in the Huffman way. It merges the two least frequent nodes
again and again until one root is left. Nodes are ordered by frequency, and then
by name. A merged node takes the sum of the two frequencies and the two names
joined together, with the smaller node as its left child. The tree then answers
four kinds of question.

## Input

The input is whitespace-separated text. It starts with the number of
satellites, followed by one `frequency name` pair for each satellite:

```
4
10 K1
20 K2
5 K3
7 K4
```

At least one satellite is required. Task-specific data follows the satellite
list:

- **Task 1** (print levels): no extra data. The tree is printed one level per
  line, left to right, as `frequency-name ` entries. An empty line follows the
  last level.
- **Task 2** (decode): a count, then that many strings of `0` and `1`. Each
  string is walked from the root: `0` goes left, any other character goes right.
  Each time the walk cannot go on, the name of the node reached is written and
  the walk starts again from the root. A name that ends the string is written
  only if it is a leaf. Each string gives one output line.
- **Task 3** (encode): a count, then that many satellite names. The path of bits
  from the root to each name is written, and all paths are joined on a single
  line.
- **Task 4** (common parent): a count, then that many satellite names. The
  output is the name of the nearest node above the first satellite whose name
  contains every other name given.

## Command line

```
satlink -c1 input.txt output.txt
```

The third character of the first argument is the task number, so `-c1`, `-c2`,
`-c3` and `-c4` select tasks 1 to 4. Any other value builds the tree and writes
an empty output file. The last two arguments are the input and output files.

If there are fewer than three arguments, the command prints a usage line and
exits with status 1. It also exits with status 1 if a file cannot be opened or
the input is malformed.

## Library use

```python
from pathlib import Path

from satlink.satellite import format_levels, tokenize
from satlink.tree import build_tree, encode

tokens = tokenize(Path("input.txt").read_text())
root = build_tree(tokens)
print(format_levels(root))
```

- `satlink.cli.run_task(task, text)` runs a whole task on input text and returns
  the output text.
- `satlink.tree` provides `build_tree`, `decode`, `encode` and `common_parent`.
  Each of them reads its data from an iterator of tokens.
- `satlink.satellite` provides the `Satellite` node, `tokenize`,
  `read_satellites`, `level_order` and `format_levels`.
- `satlink.heap.MinHeap` is a binary min-heap with `push`, `pop` and `peek`.
- `satlink.bst.SatelliteBST` is a binary search tree of satellites. `insert`
  stores a copy and ignores an equal satellite that is already present.
  `remove` returns whether a node was removed. `format_levels` prints the tree
  level by level.

Malformed input raises `ValueError`. Popping or peeking at an empty heap raises
`IndexError`.

## What it does not do

The command runs only the four link-tree tasks. `SatelliteBST` is a standalone
structure: no command uses it.

## Tests

```
pip install -e .[test]
pytest
```
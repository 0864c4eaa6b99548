# dsakit

A small collection of classic data structures and algorithms in plain Python,
with no third-party dependencies. It needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.numbers` | `primes_up_to`, `min_max`, `array_sum`, `factorial`, `fibonacci`, `fibonacci_sequence`, `count_max_diff_pairs`, `perfect_permutation` |
| `dsakit.sorting` | `merge_sort`, `merge_sorted`, `bubble_sort`, `selection_sort` |
| `dsakit.searching` | `binary_search`, `linear_search` |
| `dsakit.hanoi` | `Move`, `hanoi_moves` |
| `dsakit.strings` | `strings_equal`, `concatenate`, `remove_char`, `insert_at`, `string_length`, `replace_char`, `reverse` |
| `dsakit.patterns` | `naive_search`, `build_transition_table`, `automaton_search` |
| `dsakit.expressions` | `precedence`, `infix_to_postfix`, `evaluate_postfix` |
| `dsakit.matrix` | `add_matrices`, `multiply_matrices`, `format_matrix`, `floyd_warshall`, `INF` |
| `dsakit.graph` | `Graph` (undirected, adjacency lists) |
| `dsakit.stack` | `ArrayStack`, `StackOverflow`, `StackUnderflow` |
| `dsakit.queues` | `ArrayQueue`, `LinkedQueue`, `QueueFull`, `QueueEmpty` |
| `dsakit.linked_list` | `Node`, `LinkedList` |
| `dsakit.circular_list` | `CircularList` |
| `dsakit.bst` | `TreeNode`, `BinarySearchTree`, `inorder`, `preorder`, `postorder` |
| `dsakit.text_editor` | `TextBuffer`, `count_lines`, `count_words`, `read_text`, `write_text`, `main` |

The sorting functions return new lists and leave their input alone. The
searching functions return an index, or `None` when the target is absent.
`infix_to_postfix` and `evaluate_postfix` work on single-character operands
(single digits for evaluation); division truncates toward zero.

## Examples

```python
from dsakit.sorting import merge_sort
from dsakit.patterns import automaton_search
from dsakit.expressions import infix_to_postfix
from dsakit.bst import BinarySearchTree
from dsakit.hanoi import hanoi_moves

merge_sort([12, 11, 13, 5, 6, 7])                     # [5, 6, 7, 11, 12, 13]
automaton_search("AABAACAADAABAAABAA", "AABA")        # [0, 9, 13]
infix_to_postfix("a+b*c")                             # 'a b c * +'

tree = BinarySearchTree([50, 30, 20, 40, 70, 60, 80])
tree.delete(50)
list(tree)                                            # [20, 30, 40, 60, 70, 80]

[str(move) for move in hanoi_moves(2)]
# ['Move disk 1 from peg A to peg B',
#  'Move disk 2 from peg A to peg C',
#  'Move disk 1 from peg B to peg C']
```

Stacks and queues raise exceptions when they are used wrongly, instead of
returning a sentinel value:

```python
from dsakit.stack import ArrayStack, StackUnderflow

stack = ArrayStack(2)
stack.push(1)
stack.pop()
try:
    stack.pop()
except StackUnderflow:
    pass
```

`ArrayStack` and `ArrayQueue` hold at most `capacity` items (100 by default)
and raise `StackOverflow` or `QueueFull` beyond that; `LinkedQueue` is
unbounded.

## Text editor

`dsakit-edit` opens a text file and shows a menu. From it you can count lines,
characters and words, find a pattern, insert, delete, append or replace text,
and save the file and exit:

```
dsakit-edit notes.txt
```

If no file name is given on the command line, it asks for one. If the file
cannot be read, editing starts from empty text. Input is read as
whitespace-separated words, so each text you insert, append or replace is a
single word. An invalid position or an edit that would overflow the buffer is
reported as an error and the menu is shown again. The command exits with
status 0 after saving, and 1 if input ends early or the file cannot be
written.

The same operations are available to code through
`dsakit.text_editor.TextBuffer`.

## Limits

The text editor is deliberately small: it reads at most 999 characters of a
file, a `TextBuffer` holds at most `capacity - 1` characters (999 by default),
and there is no undo, no multi-word input from the menu and no editing of
more than one file at a time.
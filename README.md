# drillbox

Small building blocks for practice and teaching. They need nothing outside the standard library:

- **Sorting** (`drillbox.sorting`): `bubble_sort`, `insertion_sort` (it finds
  each insertion point with `binary_search`), `merge_sort` and `quick_sort`
  (it uses the Lomuto `partition`). Each one sorts a list in place and returns
  that list.
- **Linked lists** (`drillbox.linked_list`): `ListNode`, `from_iterable`,
  `iter_values`, `format_list`, `merge_lists`, and `sort_list`, which
  merge-sorts a singly linked list by relinking its nodes.
- **Thread pools** (`drillbox.thread_pool`): `ThreadPool` has one shared queue.
  `MultiQueueThreadPool` gives each worker its own queue and puts each task on
  a randomly chosen one. `WorkStealingThreadPool` lets idle workers take tasks
  from the back of other workers' queues.
- **Notepad** (`drillbox.notepad`, `drillbox.console`): a line-based
  `Notepad` model and a `ConsoleInterface` that drives it from text streams.
  By default those streams are the terminal.

## Installation

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Sorting

```python
from drillbox.sorting import merge_sort, quick_sort

merge_sort([1, 3, 5, 9, 6, 2, 4, 6])   # [1, 2, 3, 4, 5, 6, 6, 9]
```

`binary_search(nums, target, low, high)` returns two kinds of index in the
ascending slice `nums[low:high + 1]`. If an item equals `target`, it returns
that item's index. Otherwise it returns the index where `target` would be
inserted. `partition(nums, low, high)` moves the last item of the range to its
sorted position and returns that index.

## Linked lists

```python
from drillbox.linked_list import from_iterable, sort_list, format_list

head = sort_list(from_iterable([3, 1, 4, 1, 2]))
format_list(head)   # '1 -> 1 -> 2 -> 3 -> 4'
```

An empty list is `None`. The demo sorts a few built-in examples and prints
each list before and after sorting:

```
drillbox-sortlist
```

## Thread pools

```python
from drillbox.thread_pool import ThreadPool

with ThreadPool(4) as pool:
    future = pool.submit(pow, 2, 10)
    print(future.result())   # 1024
```

All three pools share the same interface:

- `submit(fn, *args, **kwargs)` returns a `concurrent.futures.Future`.
  Exceptions raised by `fn` are set on that future.
- `shutdown()` stops new submissions, lets the workers run every task already
  queued, and then joins them. A `submit` after `shutdown()` raises
  `RuntimeError`.
- Each pool is a context manager that calls `shutdown()` on exit.
- A pool needs at least one thread. A smaller number raises `ValueError`.

A demo that runs ten tasks on four workers:

```
drillbox-pool-demo
```

## Notepad

```
drillbox-notepad
```

Commands:

| command          | effect                                                       |
|------------------|--------------------------------------------------------------|
| `new`            | start an empty, unnamed file; refused while there are unsaved changes |
| `open <file>`    | replace the text with the lines of a file                    |
| `edit <text>`    | append the rest of the line as a new line                    |
| `save`           | save to the current file                                     |
| `saveas <file>`  | save under a new name, which becomes the current file        |
| `display`        | print the lines, numbered from 1                             |
| `exit`           | quit; if there are unsaved changes, offer to save them first |

If you answer `y` to the save prompt and the text has no file name yet, you
are asked for one. Running `display` on an empty text starts a fresh session
at once. `(Empty file)` is printed only when that session ends. Errors are
reported on standard error as `Error: ...`, and the prompt continues.

`ConsoleInterface(stdin, stdout, stderr)` takes any text streams, so you can
script a session:

```python
import io
from drillbox.console import ConsoleInterface
from drillbox.notepad import Notepad

out = io.StringIO()
ConsoleInterface(io.StringIO("edit hello\ndisplay\nexit\nn\n"), out, io.StringIO()).run(Notepad())
```

You can also use the model directly:

```python
from drillbox.notepad import Notepad

pad = Notepad()
pad.edit("first line")        # True; an empty string returns False
pad.save_as("notes.txt")      # True, or False if the file cannot be written
pad.lines                     # ('first line',)
pad.is_modified               # False
pad.current_file              # 'notes.txt'
```

`new_file()` raises `UnsavedChangesError` while there are unsaved edits.
`save_as("")` raises `ValueError`. `save()` and `open()` report failures by
returning `False`.

## What it does not do

The notepad only appends lines. It cannot change, delete or insert lines
within the text. Files are read and written as UTF-8 only.
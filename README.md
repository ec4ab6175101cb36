# qsortbench

The sorting routines and the input dataset for a small sorting benchmark.

The package holds an iterative quicksort and two simple in-place sorts. It also
holds a fixed dataset of 2048 unsorted integers for the quicksort to work on.

The quicksort takes the median of the left, centre and right elements as its
pivot. It pushes the larger partition onto an explicit stack and handles the
smaller one at once. A partition of ten elements or fewer is finished with
insertion sort. The module constant `qsortbench.sorting.INSERTION_THRESHOLD`
holds this cut-off.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Use

```python
from qsortbench.sorting import quicksort, insertion_sort, selection_sort
from qsortbench.input_data import DATA_SIZE, input_values

values = [5, 3, 9, 1]
quicksort(values)              # sorts the list in place
assert values == [1, 3, 5, 9]

data = input_values()
assert len(data) == DATA_SIZE  # 2048
quicksort(data)
assert data == sorted(input_values())
```

### `qsortbench.sorting`

- `quicksort(values)` sorts a mutable sequence in place.
- `insertion_sort(values, start=0, stop=None)` sorts the slice `[start, stop)`
  in place by straight insertion. When `stop` is `None`, the slice runs to the
  end of the sequence.
- `selection_sort(values, start=0, stop=None)` sorts the same kind of slice in
  place. It swaps every out-of-order pair.

`insertion_sort` and `selection_sort` raise `ValueError` unless
`0 <= start <= stop <= len(values)`.

### `qsortbench.input_data`

- `input_values()` returns a new list holding the 2048 unsorted benchmark
  integers. Each call returns a fresh copy, so a caller may sort the list
  without changing later calls.
- `DATA_SIZE` is the number of elements, 2048.

## What this package does not do

The package has no command-line program. It has no built-in sorted reference
dataset, and it has no routine that times a sort or checks a sort against a
reference. To check a result, compare it with Python's `sorted()` yourself, as
the example above does.
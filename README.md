# jdis

`jdis` computes the Jaccard distance between the sets of words in text files.
It compares every pair of the files it is given and prints one line for each
pair. The distance is `1 - |A ∩ B| / |A ∪ B|`, where `A` and `B` are the sets
of distinct words of the two files.

## Installation

```
pip install .
```

## Command line

```
jdis [--help|-?] file1.txt file2.txt [...fileN.txt]
```

The same entry point can also be started with `python -m jdis.cli`.

- You must give at least two files and no more than 64.
- A word is any run of bytes that are not whitespace. Files are read as bytes,
  so words are compared byte for byte. Words longer than 31 bytes are split
  into pieces of at most 31 bytes.
- Pairs are listed in the order the files were given: the first file with each
  later file, then the second file with each later file, and so on.
- Each output line has three tab-separated fields: the distance with four
  decimals, the first file and the second file.
- Only the first argument is checked for an option. `--help` or `-?` prints a
  help text and exits with status 0. Any other first argument that starts with
  `-` is rejected.

Example, with `a.txt` holding `the cat sat`, `b.txt` holding `the cat ran` and
`c.txt` holding `ran away`:

```
$ jdis a.txt b.txt c.txt
0.5000	a.txt	b.txt
1.0000	a.txt	c.txt
0.7500	b.txt	c.txt
```

The command writes a message (in French) to standard error and exits with
status 1 when it is given no arguments, an unsupported option, fewer than two
or more than 64 files, a file that cannot be opened, or more than 100000
distinct words across all files.

## Library

```python
from jdis.cli import JdisError, jaccard_distances, read_words, str_hash
from jdis.hashtable import HashTable, HashTableStats
from jdis.holdall import Holdall
```

### `jdis.cli`

- `jaccard_distances(paths)` returns a list of `(distance, path_i, path_j)`
  tuples, in the order the command line prints them. It raises `JdisError`
  for too few or too many files, a file that cannot be opened, or too many
  distinct words.
- `read_words(path)` yields the words of a file as `bytes`, split as described
  above.
- `str_hash(s)` is the hash used for words: a multiplicative hash with factor
  37 on 64-bit unsigned arithmetic. It takes `bytes` or `str` (encoded as
  UTF-8).
- `print_help(progname, stream=None)` writes the help text, to standard output
  by default.
- `main(argv=None)` runs the command and returns its exit status.

### `jdis.hashtable`

`HashTable(compar, hashfun)` is a hash table with separate chaining. `compar(a,
b)` returns 0 when two keys are equal; `hashfun(key)` returns a non-negative
integer. The table starts with 64 slots and doubles its number of slots
whenever adding a key would push the load factor above 1.

- `add(key, value)` stores the pair. If the key is already present, it replaces
  the value and returns the old one; otherwise it returns `value`. A `None`
  value raises `ValueError`.
- `remove(key)` removes the key and returns its value, or `None` if absent.
- `search(key)` returns the value of the key, or `None` if absent.
- `len(table)` is the number of keys.
- `get_stats()` returns a `HashTableStats` with the number of slots, the number
  of entries, the maximum and current load factor, the longest chain, and the
  theoretical and current average number of comparisons for a successful
  search.
- `fprint_stats(stream=None)` writes that report to a text stream, standard
  output by default.

### `jdis.holdall`

`Holdall()` is a container of arbitrary references. New references are put at
the head, so iteration goes from the most recently put to the first one put.

- `put(ref)` inserts a reference, without checking its value.
- `len(holdall)` is the number of references put; iteration yields them.
- `apply(fun)`, `apply_context(context, fun1, fun2)` and
  `apply_context2(context1, fun1, context2, fun2)` call respectively
  `fun(ref)`, `fun2(ref, fun1(context, ref))` and
  `fun2(context2, ref, fun1(context1, ref))` for each reference in order. They
  stop at the first non-zero result and return it, and return 0 otherwise.

The holdall offers no sorting.

## Tests

```
pip install .[test]
pytest
```
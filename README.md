# hashboggle

A small collection of hashing and word-search tools:

- `hashboggle.mt19937.MT19937`: a 32-bit Mersenne Twister. For a given
  seed it gives the same sequence as the standard `mt19937` engine. Call
  the object to get the next output, or iterate over it for an endless
  stream.
- `hashboggle.strhash.StringHash`: a string hash over letters and digits.
  The key is split into groups of six characters from the right, and each
  group is read as a base-36 number. The five groups are combined with five
  weights, and the result is truncated to 64 bits. `StringHash(debug=True)`
  uses fixed weights, so results repeat across runs. `StringHash(debug=False)`
  draws the weights from a generator seeded by the system clock. Letters are
  case-insensitive. Any character that is neither an ASCII letter nor a
  digit counts as 0 (see `letter_digit_to_number`).
- `hashboggle.hashtable.HashTable`: an open-addressing hash table. It probes
  with `LinearProber` (the default) or `DoubleHashProber`, grows through a
  fixed list of prime capacities, and removes items lazily. It grows once
  the number of used slots divided by the capacity reaches the resize
  threshold. Used slots include deleted ones.
- `hashboggle.boggle`: builds a Boggle board from Scrabble letter
  frequencies. It finds dictionary words that run in a straight line from a
  cell: to the right, downward, or along the down-right diagonal. For each
  starting cell and direction it keeps only the longest word found.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Library use

```python
from hashboggle.strhash import StringHash
from hashboggle.hashtable import HashTable, DoubleHashProber

h = StringHash(debug=True)
h("abc")                      # 9953503400

table = HashTable(0.7, DoubleHashProber(StringHash()))
table.insert("hi1", 1)
table["hi1"] += 1
table.find("hi1")             # ("hi1", 2)
"hi1" in table                # True
table.remove("hi1")
len(table)                    # 0
table.empty()                 # True
```

The `HashTable` constructor takes these arguments:

- `resize_alpha` (default 0.4)
- `prober`
- `hash_func` (default: the built-in `hash`)
- `key_equal` (default: `==`)

`find` returns a `(key, value)` tuple, or `None` if the key is absent.

`at` and `[]` raise `KeyError` for a missing key. Assigning with `[]` also
raises `KeyError` if the key is absent, so use `insert` to add new keys.

An insert raises `RuntimeError` in two cases: no free slot is left, or the
table is already at its largest capacity when it needs to grow.

For debugging, the table also offers:

- `report_all(out)`: writes every occupied bucket, deleted ones included.
- `total_probes()`: returns the probe count.
- `clear_total_probes()`: resets the probe count.

```python
from hashboggle.boggle import gen_board, format_board, parse_dict, boggle

board = gen_board(5, 42)
print(format_board(board))
words, prefixes = parse_dict("words.txt")
found = boggle(words, prefixes, board)
```

`parse_dict` reads words separated by whitespace. It returns the set of
words and the set of all their proper prefixes, and the prefix set always
includes the empty string. It raises `ValueError` if the file cannot be
opened. `print_board(board, out)` writes the formatted board to `out`, or to
standard output if no stream is given.

## Commands

Hash a string with the fixed weights:

```
str-hash antidisestablishmentarianism
```

Run the hash-table demonstration. It inserts, updates, finds and removes a
few keys and prints what happens:

```
ht-demo
```

Generate a board, print it, and list the words found on it in sorted order:

```
boggle-driver <size> <seed> <dictionary file>
```
# psiindex

Substring search over a text using two index structures:

- a plain **suffix array**, built by prefix doubling and searched by binary
  search;
- a **psi array**, a compressed form of the suffix array. Psi values are
  stored per first character in blocks of Elias-gamma coded differences.
  Only every `sample_step`-th suffix array entry is kept, and text positions
  are recovered by following psi links.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Suffix array

```python
from psiindex.suffix_array import SuffixArray, build_suffix_array

text = "mississippi"
sa = SuffixArray(text)                # builds the suffix array itself
pos = sa.find("ssi")                  # a start position of "ssi", or None
assert text[pos:pos + 3] == "ssi"

sa.memory_size()                      # entries counted as 4-byte integers
```

`SuffixArray(text, suffix_array)` also accepts a suffix array computed
beforehand, such as one from `build_suffix_array(text)`; it raises
`ValueError` if that array does not have one entry per character of the text.
The built array is available as `sa.suffix_array`.

`build_suffix_array(text)` orders suffixes by character code.

`compare_suffix(text, suffix_pos, query)` is the comparison used by the
search. It returns `-1` if the suffix sorts before the query, `1` if it sorts
after, `2` if the query is a prefix of a longer suffix, and `0` if the suffix
matches the query and ends at, or one character before, the end of the text.

## Psi array

The text must end with a unique character that is smaller than every other
character in it, so that the last suffix comes first in the suffix array.

```python
from psiindex.psi import PsiSuffixArray
from psiindex.suffix_array import build_suffix_array

text = "mississippi$"
psi = PsiSuffixArray(text, build_suffix_array(text), compress_step=8, sample_step=4)

row = psi.find_psi_index("issi")      # a suffix-array row, or None
pos = psi.text_index(row)             # position in the text
assert text[pos:pos + 4] == "issi"

print(psi.memory_size())              # "total compressed sampled_suffix_array"
```

`compress_step` is the number of psi values per gamma-coded block and
`sample_step` is the spacing of the kept suffix array entries. Larger values
use less memory and make lookups slower. The constructor raises `ValueError`
for non-positive steps, an empty text, a suffix array of the wrong length or
one that is not a permutation of the text positions, and a text that does not
end with its unique smallest character.

Other members:

- `first_char(row)`: the first character of the suffix at a row;
- `psi_value(char, row)`: psi at a row whose suffix starts with `char`;
- `regions`: a dict from character to the `Region` (inclusive `start` and
  `end` rows) of suffixes starting with it;
- `memory_size()`: a `MemoryReport` with `total`, `compressed` and
  `sampled_suffix_array` byte estimates.

Out-of-range rows raise `IndexError`.

## Gamma-coded blocks

`GammaBlock(values, start, end)` from `psiindex.gamma` stores the strictly
increasing run `values[start:end]` as a first value plus gamma-coded gaps
(`ValueError` if the range is invalid or the run is not strictly increasing).
`value_at(index)` decodes the value at an offset into the block (`IndexError`
past its end), and `heap_size()` gives the number of bytes the coded gaps
take.

## What the package does not do

There is no command-line program and no benchmark runner, and the package
does not read texts or stored suffix arrays from files. Load the text
yourself and pass it, with a suffix array if you have one, to the classes
above.
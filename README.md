# bambi

Small building blocks for working with Illumina sequencer output and
SAM/BAM data:

- `bambi.filterfile` reads Illumina `.filter` files, which hold a
  pass/fail flag for every cluster of a tile.
- `bambi.samtools` provides the CIGAR operation codes and the
  BAM binning function.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Reading a filter file

A filter file starts with a 12-byte header of three little-endian
32-bit words (an ignored word, the format version and the number of
clusters), followed by one byte per cluster. The lowest bit of each
byte says whether the cluster passed filtering.

`FilterFile` opens the file and reads the header; its `version`,
`total_clusters` and `current_cluster` attributes hold what was read.
It works as a context manager, and iterating over it yields the
remaining flags as `0` or `1`.

```python
from bambi.filterfile import FilterFile, FilterFileError

with FilterFile("s_1_1101.filter") as flt:
    print(flt.version, flt.total_clusters)
    passed = sum(flt)           # iterate over the 0/1 flags
    print(flt.current_cluster)  # clusters read so far
```

Read flags one at a time with `next()`, which returns `None` at the end
of the file and otherwise advances `current_cluster`. Or position the
file with `seek()`, read a block into memory with `load()` and look
flags up by index with `get()`:

```python
with FilterFile("s_1_1101.filter") as flt:
    flt.seek(100)       # position at cluster 100
    flt.load(50)        # read 50 flags into memory
    print(flt.get(0))   # flag for cluster 100
```

`load()` also sets `total_clusters` to the number of flags loaded.

### Errors

`FilterFileError` is raised when the file cannot be opened, when its
header is short, when `load()` reads fewer bytes than asked for, when a
seek fails, and when a closed file is used. `get()` raises `IndexError`
for an index outside the loaded block. `close()` may be called more
than once.

## CIGAR operations and bins

`CigarOp` is an integer enumeration of the CIGAR operations in their
BAM order (`MATCH`, `INS`, `DEL`, `REF_SKIP`, `SOFT_CLIP`, `HARD_CLIP`,
`PAD`, `BASE_MATCH`, `BASE_MISMATCH`). `CigarOp.from_char()` maps a
letter from `MIDNSHP=X` to its operation and raises `ValueError` for
anything else; `char()` gives the letter back.

`reg2bin(beg, end)` returns the BAM index bin of the zero-based,
half-open region `[beg, end)`.

```python
from bambi.samtools import CigarOp, reg2bin

op = CigarOp.from_char("S")
print(op.name, int(op), op.char())  # SOFT_CLIP 4 S
print(reg2bin(0, 1))                # 4681
```

## What this package does not do

It has no command-line tool, and it does not read or write SAM, BAM
or CRAM files, base-call files or position files. It covers the filter
file format and the CIGAR and binning definitions above, and nothing
more.
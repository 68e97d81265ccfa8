# huffcode

Huffman coding for files and byte strings. It counts how often each byte
occurs and builds a prefix code from those counts. It then writes compressed
data that carries its own code table, and it can restore that data to the
original bytes.

## Installing

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Command line

The package installs a `huffcode` command with two working modes,
`compress` and `decompress`:

```
huffcode compress
huffcode decompress
huffcode compress -i notes.txt -o notes.huf
huffcode decompress -i notes.huf -o notes.out.txt
```

- `compress` reads `../input.txt` and writes `../output.txt` unless told otherwise.
- `decompress` reads `../output.txt` and writes `../output2.txt` unless told otherwise.
- `-i/--input` and `-o/--output` override the file to read and the file to write.
- If the mode is left out, the first word read from standard input is used as
  the mode. A mode other than `compress` or `decompress` does nothing and
  exits with status 0.

After a successful run the command prints the processor time taken and the
sizes of both files. When compressing it also prints the compression ratio,
which is the compressed size divided by the input size. If a file cannot be
read or written, or the data cannot be handled, it prints
`huffcode: <reason>` to standard error and exits with status 1.

## Library use

Working with bytes in memory:

```python
from huffcode.huffman import compress, decompress

blob = compress(b"abracadabra")
assert decompress(blob) == b"abracadabra"
```

Working with files:

```python
from huffcode.huffman import compress_file, decompress_file

compress_file("notes.txt", "notes.huf")
decompress_file("notes.huf", "notes.out.txt")
```

The individual steps are available too:

- `huffcode.frequency.count_frequencies(data)` returns a `collections.Counter`
  of byte values. `huffcode.frequency.read_frequencies(path)` does the same
  for a file's contents.
- `huffcode.huffman.build_code_map(frequencies)` turns counts into a dict from
  byte value to its bit string, such as `"0101"`. The end-of-data marker
  `huffcode.header.PSEUDO_EOF` is included.
- `huffcode.huffman.encode_bits(data, codes)` returns the bit string for the
  data followed by the end-of-data code. `huffcode.huffman.pack_bits(bits)`
  pads it with zeros and packs it into bytes, most significant bit first.
- `huffcode.huffman.unpack_bits(payload)` expands bytes back into a bit string.
  `huffcode.huffman.build_decoding_tree(codes)` rebuilds the tree.
  `huffcode.huffman.decode_bits(bits, root)` walks the tree until it reaches
  the end-of-data symbol.
- `huffcode.header.write_header(stream, codes)` writes the code table to a
  binary stream. `huffcode.header.read_header(stream)` reads it back and
  leaves the stream positioned just after the table.
- `huffcode.node.Node` is the tree node, a dataclass with `symbol`,
  `frequency`, `left` and `right`. `Node.is_leaf()` is true when the node
  carries a symbol.

Malformed input raises `ValueError`. This covers a header without its
terminator, codes that are not made of `0` and `1`, and a bit stream that does
not fit the code table.

## File layout

A compressed file begins with the code table. Each entry is the symbol byte,
the separator byte `0x82`, the symbol's code written as ASCII `0`/`1`
characters, and the terminator `0x83`. The byte `0x84` closes the table. The
packed code bits follow, ending with the end-of-data code and zero padding.

## Limitations

- The bytes `0x80` to `0x84` are reserved by the file layout. Data that
  contains any of them cannot be compressed, and `build_code_map` raises
  `ValueError` for it.
- Files are read and written whole, in memory. There is no streaming mode.
# pipex

A small collection of helpers. It covers ASCII character classification, byte-buffer operations, string utilities and a singly linked list. It also has stream output, a compact `printf`-style formatter, a buffered line reader, and a command-line entry point that parses a pipeline-style argument list.

## Installation

```
pip install .
```

To install the test extra, run `pip install .[test]`.

## Modules

- `pipex.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper` and `to_lower`. Each one accepts a character code or a one-character string. Only the ASCII ranges are considered. The case converters return the same kind of value they were given.
- `pipex.memory`: `memset`, `bzero`, `memcpy`, `memchr`, `memcmp` and `calloc` work on `bytearray` and `bytes`.
  - `memmove(buffer, dest, src, n)` copies between offsets within a single buffer and handles overlapping regions.
  - `memchr` returns an index, or `None` when the byte is not found.
  - `calloc` raises `MemoryError` when the requested size would overflow.
- `pipex.strings`: `atoi`, `itoa`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strlcpy`, `strlcat`, `substr`, `strjoin`, `strtrim`, `split`, `strmapi` and `striteri`.
  - The search functions return indices, or `None` when nothing is found.
  - `strlcpy` and `strlcat` return a tuple of the resulting text and the length the full result would have had.
  - `split` drops empty pieces.
  - `striteri` replaces an item in place whenever the callback returns something other than `None`.
- `pipex.linkedlist`: `Node` and `LinkedList`.
  - `LinkedList` provides `push_front`, `push_back`, `last`, `clear(delete)`, `for_each(f)` and `map(f, delete)`.
  - It also supports iteration, `len()` and truth testing.
  - If the function passed to `map` raises, the values already produced are passed to `delete` and the exception propagates.
- `pipex.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`. Each writes to a text stream, which is standard output by default.
- `pipex.formatting`: `format_string(fmt, *args)` and `printf(fmt, *args, file=None)` handle the conversions `%c %s %d %i %u %x %X %p %%`.
  - `printf` returns the number of characters written.
  - An unrecognised specifier is dropped, and the character after the `%` is printed as it is.
  - A `None` string prints as `(null)`, and a zero or `None` pointer prints as `(nil)`.
  - `%d`, `%i`, `%u`, `%x` and `%X` wrap values to 32 bits. `%p` wraps values to 64 bits.
  - The module also has `to_hex`, `format_unsigned` and `format_pointer`.
- `pipex.linereader`: `LineReader(source, buffer_size=4)` reads a file descriptor or file object in chunks of `buffer_size`. This works for both binary and text sources.
  - `next_line()` returns the next line with its trailing newline, or `None` at the end.
  - `reset()` discards data that has been read ahead.
  - A `LineReader` is iterable, and `read_lines(source, buffer_size)` yields every line.
- `pipex.cli`: `parse_arguments(argv)` returns an `Invocation` with the fields `infile`, `commands` and `outfile`. `main(argv=None)` is the command-line entry point.

## Examples

```python
import io

from pipex.formatting import format_string
from pipex.linereader import read_lines

format_string("%s has %d items (%x)", "box", 42, 255)
# 'box has 42 items (ff)'

list(read_lines(io.BytesIO(b"one\ntwo"), 4))
# [b'one\n', b'two']
```

## Command line

```
pipex infile "cmd1" "cmd2" outfile
```

The command needs at least two arguments. It handles them as follows:

- The first argument names the input file, which is opened for reading. If it cannot be opened, this is ignored.
- The last argument names the output file, which is created or truncated with mode `0644`.
- The arguments in between are collected as the list of commands.

The exit status is 0 on success. It is 1 when there are too few arguments or when the output file cannot be opened.

## Limitations

The command does not run the commands it is given. It does not connect them into a pipeline, and it writes nothing to the output file. It only parses the argument list, opens the input file, and creates or truncates the output file.
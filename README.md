# miniprintf

A small printf-style formatter for a fixed set of conversions. It has no
flags, no field widths and no precision. Integers wrap to the sizes of C's
32-bit `int` and `unsigned int`. Addresses wrap to 64 bits.

| Spec | Argument | Output |
|------|----------|--------|
| `%c` | int (reduced to one byte) or a one-character str | the character |
| `%s` | str or `None` | the string up to its first NUL, or `(null)` for `None` |
| `%p` | int address, `None`, or any other object (its `id` is used) | `0x` followed by lowercase hex, or `(nil)` for `None` or a zero address |
| `%d`, `%i` | int | signed 32-bit decimal |
| `%u` | int | unsigned 32-bit decimal |
| `%x`, `%X` | int | unsigned 32-bit hex, lower or upper case |
| `%%` | none | a literal `%` |

Any other character after `%` writes nothing and uses no argument. A `%` at
the very end of the format also writes nothing. A `None` format gives empty
output.

## Installation

```
pip install .
```

## Usage

```python
from miniprintf.printf import printf, sprintf

text = sprintf("%s has %d items (%x)", "cart", 42, 255)
# 'cart has 42 items (ff)'

count = printf("%c%c\n", 72, "i")   # writes "Hi\n" to stdout, returns 3
```

`sprintf(fmt, *args)` returns the formatted text.
`printf(fmt, *args, file=None)` writes it to `sys.stdout`, or to `file` if you
give one, and returns the number of characters written.

`format_arg(spec, args)` renders a single conversion. It takes its argument
from `args` when the conversion needs one. Pass an iterator if consumed
arguments should stay consumed between calls.

`FormatArgumentError` (a subclass of `TypeError`) is raised in two cases:
when a conversion has no argument left, and when the argument does not suit
the conversion, such as a str for `%d` or a two-character str for `%c`.

Each conversion is also available on its own from `miniprintf.conversions`:
- `format_char`
- `format_string`
- `format_pointer`
- `format_int`
- `format_uint`
- `format_hex(value, spec)`, where `spec` is `"x"` or `"X"`

Called directly, these raise `TypeError` or `ValueError`.

## Running the tests

```
pip install .[test]
pytest
```
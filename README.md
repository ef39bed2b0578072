# pixatar

Generate pixel art avatar images from a username.

The text is encoded as UTF-8. Each byte becomes one row (vertical layout) or
one column (horizontal layout) of eight pixels. A set bit is drawn in the
foreground colour and a clear bit in the background colour. Every bit is
scaled up to a 32×32 block. The result is an 8-bit RGBA PNG with `gAMA` and
`cHRM` chunks.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
pixatar [TEXT] [--hue N] [--background {black,white}]
        [--opacity {solid,transparent}]
        [--orientation {vertical,horizontal}]
        [--bit-order {most,least}] [-o FILE]
```

- `TEXT` is the username to draw. The default is `pixatar`.
- `--hue` is the foreground hue, an integer from 0 to 360. The default is 152. The foreground is that hue at full saturation and 50% lightness.
- `--background` sets the colour of clear bits. The default is `black`.
- `--opacity` sets whether background pixels are opaque (`solid`, the default) or fully transparent (`transparent`).
- `--orientation` sets the layout of the characters. The default is `vertical`: one row per byte. With `horizontal` there is one column per byte.
- `--bit-order` selects `most` or `least` significant bit first. The default is `least`.
- `-o FILE`, `--output FILE` writes a PNG file. Without this option the command prints a `data:image/png;base64,...` URL to standard output.

Example:

```
pixatar alice --hue 200 --background white --orientation horizontal -o alice.png
```

If the text is empty, the command prints an empty line. If the text is empty
and `-o` is given, the command exits with an error.

The same command can be started with `python -m pixatar.cli`.

## Library use

```python
from pixatar.settings import Spec, Background, Orientation
from pixatar.generator import encode_png, data_url

spec = Spec().with_hue(200).with_bg(Background.WHITE).with_orient(Orientation.HORIZONTAL)

png_bytes = encode_png("pixatar", spec)
with open("avatar.png", "wb") as fh:
    fh.write(png_bytes)

url = data_url("pixatar", spec)  # an empty string when the text is empty
```

`Spec` is a frozen dataclass with these fields:

| Field | Type | Default |
|---|---|---|
| `hue` | `int` | `152` |
| `bg` | `Background` | `Background.BLACK` |
| `opacity` | `Opacity` | `Opacity.SOLID` |
| `orient` | `Orientation` | `Orientation.VERTICAL` |
| `ordering` | `Endian` | `Endian.LEAST` |

The methods `with_hue`, `with_bg`, `with_opacity`, `with_orient` and
`with_ordering` each return a modified copy. A negative hue raises
`ValueError`. Hues above 360 wrap around.

The module `pixatar.generator` provides:

- `color_values(spec)` returns the `(foreground, background)` RGBA tuples.
- `pixel_data(spec, rows)` returns the raw scaled RGBA pixels for an iterable of bit rows.
- `encode_png(text, spec)` returns the PNG bytes. It raises `ValueError` for empty text.
- `data_url(text, spec)` returns the PNG as a base64 data URL. It returns `""` for empty text.

`pixatar.bits.bit_values(text)` returns the bits of each UTF-8 byte, least
significant bit first. `pixatar.bits.BitRows` gives the grid of bits directly.
Its `dimensions()` method returns `(width, height)` in bits. Iterating over it
yields each row as a list of booleans:

```python
from pixatar.bits import BitRows
from pixatar.settings import Orientation, Endian

rows = BitRows("abc", Orientation.HORIZONTAL, Endian.MOST)
rows.dimensions()   # (3, 8)
next(iter(rows))    # [True, False, True]
```

## What it does not do

pixatar has no interactive or browser interface with a live preview. Images
are made only through the `pixatar` command or the library functions above.
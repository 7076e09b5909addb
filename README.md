# imglab

A small toolkit of classic image-processing operations on RGB images held as
NumPy arrays, with a command that applies one operation to an image file.

- point transforms: gray and color negatives, thresholding, contrast scaling,
  linear stretching of the gray range and histogram equalization
- histograms of gray levels and of each color channel, and rendering them as
  bar-chart images
- salt-and-pepper noise
- mean and median filters
- binary morphology with a 3×3 structuring element: erosion, dilation,
  opening and closing
- edge detection: first differences, Roberts, Sobel, Prewitt, Laplace and
  Laplacian-of-Gaussian, each for gray and color images

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides the `imglab` command. It reads one image,
applies one operation and writes the result to the output file(s) given; the
image format follows each file's suffix.

```
imglab --help
imglab <operation> --help
imglab <operation> INPUT OUTPUT [OUTPUT ...] [options]
```

| Operation   | Outputs                     | Options                                   |
|-------------|-----------------------------|-------------------------------------------|
| `negative`  | 1                           | `--color`                                 |
| `threshold` | 1                           | `--level N` (required)                    |
| `contrast`  | 1                           | `--factor F` (required), `--color`        |
| `stretch`   | 1                           |                                           |
| `equalize`  | 1                           |                                           |
| `histogram` | 1, or 3 with `--color`      | `--height N` (default 200), `--color`     |
| `mean`      | 1                           | `--size N` (default 3)                    |
| `median`    | 1                           | `--size N` (default 3), `--color`         |
| `noise`     | 1                           | `--percent P` (default 10), `--seed N`    |
| `gradient`  | 2 (x, then y)               | `--color`                                 |
| `roberts`   | 2                           | `--color`                                 |
| `sobel`     | 2 (x, then y)               | `--color`                                 |
| `prewitt`   | 2 (x, then y)               | `--color`                                 |
| `laplace`   | 1                           | `--color`                                 |
| `log`       | 1                           | `--color`                                 |
| `open`      | 1                           |                                           |
| `close`     | 1                           |                                           |

Without `--color` an operation works on gray levels; with it, on each channel.
`histogram --color` writes the red, green and blue charts in that order.

Examples:

```
imglab threshold photo.png binary.png --level 128
imglab sobel photo.png sobel_x.png sobel_y.png --color
imglab noise photo.png noisy.png --percent 5 --seed 1
```

Giving the wrong number of output paths is a usage error (exit status 2). If
the image cannot be read or written, or the operation rejects the image (for
example `stretch` on an image with a single gray level), the message is printed
to standard error and the exit status is 1.

## Library use

Images are `height × width × 3` arrays of 8-bit RGB values. Load and save them
with the helpers in `imglab.pixels`:

```python
from imglab.pixels import load_rgb, save_image
from imglab.point import threshold, equalize
from imglab.filters import median_color
from imglab.edges import sobel_gray

rgb = load_rgb("photo.png")

save_image(threshold(rgb, 128), "binary.png")
save_image(equalize(rgb), "equalized.png")
save_image(median_color(rgb, 3), "denoised.png")

gx, gy = sobel_gray(rgb)
save_image(gx, "sobel_x.png")
save_image(gy, "sobel_y.png")
```

`gray_levels` returns the gray level of every pixel, computed as
`(11 R + 16 G + 5 B) // 32`; `gray_to_rgb` turns a `height × width` gray image
back into an RGB one, and `clamp` clips values into 0–255 as `uint8`.
`save_image` accepts either an RGB or a gray array.

### Point operations (`imglab.point`)

- `negative_gray(rgb)`, `negative_color(rgb)`: `255 - value`.
- `threshold(rgb, level)`: gray levels above `level` become 255, below it 0;
  levels equal to `level` are kept.
- `contrast_gray(rgb, factor)`, `contrast_color(rgb, factor)`: multiply and
  truncate, clipped to 0–255.
- `linear_stretch(rgb)`: maps the gray range `[min, max]` onto `[0, 255]`;
  raises `ValueError` for an empty image or one with a single gray level.
- `equalize(rgb)`: maps each gray level through `cdf * 255 // pixel_count`.

### Histograms (`imglab.histogram`)

```python
from imglab.histogram import gray_histogram, channel_histograms, render_histogram, RED

counts = gray_histogram(rgb)                  # 256 bins
chart = render_histogram(counts, 200)         # black bars on white
save_image(chart, "histogram.png")

red, green, blue = channel_histograms(rgb)
save_image(render_histogram(red, 200, RED), "red.png")
```

`render_histogram` draws a `height × 256` image whose bars are scaled so the
largest count fills the height. The module also defines the colors `WHITE`,
`BLACK`, `RED`, `GREEN`, `BLUE` and `DEFAULT_HEIGHT` (200).

### Noise (`imglab.noise`)

```python
import numpy as np
from imglab.noise import salt_and_pepper

noisy = salt_and_pepper(rgb, 0.1, np.random.default_rng(0))
```

`int(width * height * level)` positions are drawn at random (repeats allowed)
and each becomes black or white with equal chance. Passing a seeded generator
makes the result reproducible; a negative level raises `ValueError`.

### Smoothing (`imglab.filters`)

- `mean_filter(rgb, size)`: per-channel sum over a window of
  `2 * ((size - 1) // 2) + 1` pixels a side, divided by `size * size`. The
  result is `(size - 1) // 2` pixels smaller in each direction, and the
  uncovered border is black.
- `median_gray(rgb, size)`: for an odd `size`, each filtered pixel takes half
  of the largest gray level in its window. Sizing and border are as for
  `mean_filter`; an even size raises `ValueError`.
- `median_color(rgb, size=3)`: per-channel median over the window; the output
  keeps the input's size with a black border.

### Morphology (`imglab.morphology`)

```python
from imglab.morphology import binarize, erode, dilate, opening, closing

binary = binarize(rgb, 128)   # height × width, values 0 or 255
eroded = erode(binary)
dilated = dilate(binary)
opened = opening(rgb)         # binarize at 128, erode, dilate
closed = closing(rgb)         # binarize at 128, dilate, erode
```

All use a full 3×3 structuring element; the one-pixel border of each result
is black. The results are gray arrays; pass them to `gray_to_rgb` or straight
to `save_image`.

### Edges (`imglab.edges`)

Every detector has a gray form (`*_gray`) working on gray levels and a color
form (`*_color`) working on each channel separately. Responses are absolute
values clipped to 0–255.

- `gradient_*`: horizontal differences (one column narrower) and vertical
  differences (one row shorter).
- `roberts_*`: the two diagonal cross differences, both one row and one column
  smaller.
- `sobel_*`, `prewitt_*`: x and y responses of the 3×3 masks (`SOBEL_X`,
  `SOBEL_Y`, `PREWITT_X`, `PREWITT_Y`).
- `laplace_*`: the 3×3 `LAPLACE` mask; `log_*`: the 5×5 `LOG` mask.

`convolve_magnitude(channel, mask)` applies any square, odd-sized mask to a
single 2-D channel the same way. Mask-based results keep the input's size;
the border the mask cannot cover is black.

## What it does not do

There is no interactive window or image viewer: the command and the functions
take images in and give images back, and results are only seen by writing
them to files and opening them elsewhere. Images are always converted to RGB
on loading; transparency is dropped.
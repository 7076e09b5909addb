"""Command-line front end that applies one image operation and writes the results."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Dict, Sequence, Tuple

import numpy as np

from imglab import edges, filters, histogram, morphology, noise, point
from imglab.pixels import gray_to_rgb, load_rgb, save_image

Results = Tuple[np.ndarray, ...]
Operation = Callable[[np.ndarray, argparse.Namespace], Results]


def _negative(image: np.ndarray, args: argparse.Namespace) -> Results:
    if args.color:
        return (point.negative_color(image),)
    return (point.negative_gray(image),)


def _threshold(image: np.ndarray, args: argparse.Namespace) -> Results:
    return (point.threshold(image, args.level),)


def _contrast(image: np.ndarray, args: argparse.Namespace) -> Results:
    if args.color:
        return (point.contrast_color(image, args.factor),)
    return (point.contrast_gray(image, args.factor),)


def _stretch(image: np.ndarray, args: argparse.Namespace) -> Results:
    return (point.linear_stretch(image),)


def _equalize(image: np.ndarray, args: argparse.Namespace) -> Results:
    return (point.equalize(image),)


def _histogram(image: np.ndarray, args: argparse.Namespace) -> Results:
    if args.color:
        colors = (histogram.RED, histogram.GREEN, histogram.BLUE)
        return tuple(
            histogram.render_histogram(counts, args.height, color)
            for counts, color in zip(histogram.channel_histograms(image), colors)
        )
    counts = histogram.gray_histogram(image)
    return (histogram.render_histogram(counts, args.height, histogram.BLACK),)


def _mean(image: np.ndarray, args: argparse.Namespace) -> Results:
    return (filters.mean_filter(image, args.size),)


def _median(image: np.ndarray, args: argparse.Namespace) -> Results:
    if args.color:
        return (filters.median_color(image, args.size),)
    return (filters.median_gray(image, args.size),)


def _noise(image: np.ndarray, args: argparse.Namespace) -> Results:
    rng = np.random.default_rng(args.seed)
    return (noise.salt_and_pepper(image, args.percent / 100.0, rng),)


def _edge_pair(gray_op, color_op) -> Operation:
    def run(image: np.ndarray, args: argparse.Namespace) -> Results:
        return tuple(color_op(image) if args.color else gray_op(image))

    return run


def _edge_single(gray_op, color_op) -> Operation:
    def run(image: np.ndarray, args: argparse.Namespace) -> Results:
        return ((color_op if args.color else gray_op)(image),)

    return run


def _opening(image: np.ndarray, args: argparse.Namespace) -> Results:
    return (gray_to_rgb(morphology.opening(image)),)


def _closing(image: np.ndarray, args: argparse.Namespace) -> Results:
    return (gray_to_rgb(morphology.closing(image)),)


def _output_count(args: argparse.Namespace) -> int:
    if args.command == "histogram" and args.color:
        return 3
    if args.command in _PAIR_COMMANDS:
        return 2
    return 1


_PAIR_COMMANDS = {"gradient", "roberts", "sobel", "prewitt"}

_OPERATIONS: Dict[str, Operation] = {
    "negative": _negative,
    "threshold": _threshold,
    "contrast": _contrast,
    "stretch": _stretch,
    "equalize": _equalize,
    "histogram": _histogram,
    "mean": _mean,
    "median": _median,
    "noise": _noise,
    "gradient": _edge_pair(edges.gradient_gray, edges.gradient_color),
    "roberts": _edge_pair(edges.roberts_gray, edges.roberts_color),
    "sobel": _edge_pair(edges.sobel_gray, edges.sobel_color),
    "prewitt": _edge_pair(edges.prewitt_gray, edges.prewitt_color),
    "laplace": _edge_single(edges.laplace_gray, edges.laplace_color),
    "log": _edge_single(edges.log_gray, edges.log_color),
    "open": _opening,
    "close": _closing,
}

_HELP = {
    "negative": "negative of the gray levels, or of every channel with --color",
    "threshold": "binarize the gray levels at a level",
    "contrast": "multiply gray levels, or every channel with --color, by a factor",
    "stretch": "stretch the gray range linearly onto 0..255",
    "equalize": "equalize the gray-level histogram",
    "histogram": "draw the gray histogram, or red, green and blue ones with --color",
    "mean": "mean filter over a square window",
    "median": "median filter of gray levels, or of every channel with --color",
    "noise": "add salt-and-pepper noise",
    "gradient": "horizontal and vertical differences",
    "roberts": "Roberts cross differences",
    "sobel": "Sobel x and y responses",
    "prewitt": "Prewitt x and y responses",
    "laplace": "3x3 Laplacian response",
    "log": "5x5 Laplacian-of-Gaussian response",
    "open": "binarize, then erode and dilate",
    "close": "binarize, then dilate and erode",
}

_COLOR_COMMANDS = {
    "negative", "contrast", "histogram", "median",
    "gradient", "roberts", "sobel", "prewitt", "laplace", "log",
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="imglab", description="Apply an image operation and save the result."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, help_text in _HELP.items():
        sub = commands.add_parser(name, help=help_text, description=help_text)
        sub.add_argument("input", help="image to read")
        sub.add_argument("outputs", nargs="+", help="image file(s) to write")
        if name in _COLOR_COMMANDS:
            sub.add_argument("--color", action="store_true", help="work on every channel")
        if name == "threshold":
            sub.add_argument("--level", type=int, required=True, help="gray threshold")
        elif name == "contrast":
            sub.add_argument("--factor", type=float, required=True, help="contrast factor")
        elif name == "histogram":
            sub.add_argument(
                "--height", type=int, default=histogram.DEFAULT_HEIGHT, help="chart height"
            )
        elif name == "mean":
            sub.add_argument("--size", type=int, default=3, help="mask size")
        elif name == "median":
            sub.add_argument("--size", type=int, default=3, help="mask size")
        elif name == "noise":
            sub.add_argument(
                "--percent", type=float, default=10.0, help="share of pixels to disturb"
            )
            sub.add_argument("--seed", type=int, default=None, help="random seed")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; return 0 on success and 1 when the operation fails."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    expected = _output_count(args)
    if len(args.outputs) != expected:
        parser.error(
            f"{args.command} writes {expected} image(s), got {len(args.outputs)} output path(s)"
        )
    try:
        image = load_rgb(args.input)
        results = _OPERATIONS[args.command](image, args)
        for result, path in zip(results, args.outputs):
            save_image(result, path)
    except (OSError, ValueError) as exc:
        print(f"imglab: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
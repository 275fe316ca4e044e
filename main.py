"""
Raster Studio
Pixel-buffer transforms, Haar-wavelet compression and histogram tools.
"""

import logging
import sys

logger = logging.getLogger(__name__)

USAGE = """\
Usage: python main.py <image_path|--synthetic[=key]> <operation> [args...] [-o output] [-v]

Operations:
  brighten <delta>                 horizontal-flip     vertical-flip
  red-component   green-component  blue-component
  value-component intensity-component luma-component
  greyscale  sepia  blur  sharpen  histogram  color-correct
  compress <quality>               levels-adjust <black> <mid> <white>
                                   (0 <= black < mid < white <= 255)
  split-view <kind> <percent>      downscale <width> <height>
  rgb-split                        (writes <output>-red/-green/-blue)
  rgb-combine <green_path> <blue_path>
                                   (source supplies red; each path its own channel)
"""


def _operations():
    from engines import pointwise
    from engines.convolution import blur, sharpen
    from engines.histogram import histogram, color_correct
    from engines.levels import levels_adjust
    from engines.pipeline import compress
    from engines.resampler import downscale
    from engines.split_view import split_view
    from utils.image_io import load_image

    return {
        'brighten': (1, lambda img, d: pointwise.adjust_brightness(img, int(d))),
        'horizontal-flip': (0, pointwise.flip_horizontal),
        'vertical-flip': (0, pointwise.flip_vertical),
        'red-component': (0, lambda img: pointwise.extract_component(img, 'red')),
        'green-component': (0, lambda img: pointwise.extract_component(img, 'green')),
        'blue-component': (0, lambda img: pointwise.extract_component(img, 'blue')),
        'value-component': (0, pointwise.value),
        'intensity-component': (0, pointwise.intensity),
        'luma-component': (0, pointwise.luma),
        'greyscale': (0, pointwise.greyscale),
        'sepia': (0, pointwise.sepia),
        'blur': (0, blur),
        'sharpen': (0, sharpen),
        'histogram': (0, histogram),
        'color-correct': (0, color_correct),
        'compress': (1, lambda img, q: compress(img, int(q))),
        'levels-adjust': (3, lambda img, b, m, w: levels_adjust(img, int(b), int(m), int(w))),
        'split-view': (2, lambda img, kind, pct: split_view(kind, int(pct), img)),
        'downscale': (2, lambda img, w, h: downscale(img, int(w), int(h))),
        'rgb-split': (0, pointwise.split_components),
        'rgb-combine': (2, lambda img, g, b: pointwise.combine_components(
            img, load_image(g), load_image(b)
        )),
    }


def _output_paths(output, count):
    if count == 1:
        return [output]
    stem, dot, ext = output.rpartition('.')
    if not dot:
        stem, ext = output, 'png'
    return [f"{stem}-{name}.{ext}" for name in ('red', 'green', 'blue')]


def run_cli(argv):
    """Apply one operation to an image file (or a synthetic image) and save it."""
    from models.errors import ImageEngineError
    from utils.image_io import load_image, save_image
    from utils.test_images import generate_demo_image

    args = list(argv)
    verbose = '-v' in args
    if verbose:
        args.remove('-v')
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    output = "output.png"
    if '-o' in args:
        i = args.index('-o')
        if i + 1 >= len(args):
            print(USAGE)
            return 2
        output = args[i + 1]
        del args[i:i + 2]

    if len(args) < 2 or args[0] in ('-h', '--help'):
        print(USAGE)
        return 0 if args and args[0] in ('-h', '--help') else 2

    source, op_name, op_args = args[0], args[1].lower(), args[2:]
    operations = _operations()
    if op_name not in operations:
        print(f"Unknown operation: {op_name}")
        print(USAGE)
        return 2
    arity, func = operations[op_name]
    if len(op_args) != arity:
        print(f"{op_name} expects {arity} argument(s), got {len(op_args)}")
        return 2

    try:
        if source.startswith('--synthetic'):
            key = source.partition('=')[2] or 'checkerboard'
            image = generate_demo_image(key)
            if image is None:
                print(f"Unknown synthetic image: {key}")
                return 2
            print(f"Generated synthetic '{key}' image")
        else:
            print(f"Loading: {source}")
            image = load_image(source)
        print(f"Image: {image.width}x{image.height}")

        result = func(image, *op_args)
        results = result if isinstance(result, tuple) else (result,)
        for buffer, path in zip(results, _output_paths(output, len(results))):
            save_image(buffer, path)
            print(f"Saved: {path} ({buffer.width}x{buffer.height})")
    except (ImageEngineError, ValueError) as e:
        logger.error("%s failed: %s", op_name, e)
        return 1
    return 0


def main():
    sys.exit(run_cli(sys.argv[1:]))


if __name__ == '__main__':
    main()

"""
Pixel Filter Toolkit command line entry point

Apply named filters or a saved pipeline to an image file.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .core import PixelFilterError
from .processing import (
    FilterPipeline,
    ImageProcessor,
    build_default_registry,
    get_all_categories,
    get_filters_by_category,
)
from .services import PipelineSerializer, Settings


logger = logging.getLogger("pixelfilter")


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pixelfilter",
        description="Apply per-pixel color filters to an image",
    )
    p.add_argument("input", nargs="?", help="Image to read")
    p.add_argument("output", nargs="?", help="Image to write")

    g_filters = p.add_argument_group("Filters")
    source = g_filters.add_mutually_exclusive_group()
    source.add_argument(
        "-f", "--filter", dest="filters", action="append", metavar="NAME",
        help="Registered filter name; repeat to build a pipeline in order",
    )
    source.add_argument("--pipeline", metavar="FILE", help="Pipeline JSON file")
    g_filters.add_argument("--presets", metavar="FILE", help="Presets JSON file to register")
    g_filters.add_argument("--list", action="store_true", help="List filters and exit")

    g_run = p.add_argument_group("Processing")
    g_run.add_argument("--workers", type=int, default=None, help="Worker threads (0 = automatic)")
    g_run.add_argument("--settings", metavar="FILE", default=None, help="Settings INI file")
    g_run.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    return p


def configure_logging(level: str) -> None:
    """Attach a console handler to the package logger."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        "[%(asctime)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    ))
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)


def _print_filters(registry) -> None:
    print("Registered filters:")
    for name in registry.names():
        f = registry.lookup(name)
        params = getattr(f, "get_parameters", dict)()
        print(f"  {name!r}: {type(f).__name__} {params}")

    print("\nFilter types:")
    for category in get_all_categories():
        print(f"  {category}")
        for f in get_filters_by_category(category):
            params = ", ".join(
                f"{key}={param.default}" for key, param in f.PARAMETERS.items()
            )
            print(f"    {f.filter_id} ({f.name}){': ' + params if params else ''}")


def run(args: argparse.Namespace, settings: Settings) -> None:
    registry = build_default_registry()
    presets_file = args.presets or settings.get_presets_file()
    if presets_file:
        PipelineSerializer.load_presets(presets_file, registry)

    if args.list:
        _print_filters(registry)
        return

    if args.pipeline:
        pipeline = PipelineSerializer.load_from_file(args.pipeline)
    else:
        pipeline = FilterPipeline.from_names(registry, args.filters)

    # Imported late so --list works without OpenImageIO
    from .oiio import OiioAdapter

    max_workers = settings.get_max_workers() if args.workers is None else (args.workers or None)
    processor = ImageProcessor(
        registry=registry,
        max_workers=max_workers,
        chunk_size=settings.get_chunk_size(),
    )

    image = OiioAdapter.read_image(args.input)
    logger.info("Read %s (%dx%d)", args.input, image.width, image.height)

    result = processor.process_image(image, pipeline)

    OiioAdapter.write_image(args.output, result)
    logger.info("Wrote %s after %d filter(s)", args.output, len(pipeline))


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line tool. Returns the process exit status."""
    parser = build_argparser()
    args = parser.parse_args(argv)

    if not args.list:
        if not (args.input and args.output):
            parser.error("input and output are required unless --list is given")
        if not (args.filters or args.pipeline):
            parser.error("give at least one --filter or a --pipeline file")
    if args.workers is not None and args.workers < 0:
        parser.error("--workers must be >= 0")

    settings = Settings(args.settings)
    level = "DEBUG" if args.verbose else settings.get_log_level()
    configure_logging(level)

    try:
        run(args, settings)
    except (PixelFilterError, FileNotFoundError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

import argparse
import logging
import os
import sys

from . import __version__
from .backends import BACKENDS, get_backend
from .config import (
    DEFAULT_ACCENT_CONTRAST,
    DEFAULT_CLUSTER_COUNT,
    DEFAULT_SEED,
    clamp_min_contrast,
    resolve_config_home,
)
from .errors import NuriError
from .export import generate_readability_report, print_palette
from .palette import ThemeMode, generate_palette, load_and_prepare

logger = logging.getLogger(__name__)


def _build_parser():
    parser = argparse.ArgumentParser(
        prog="nuri",
        description="Generate terminal color themes from wallpaper images",
    )
    parser.add_argument("image_path", help="Path to the source image")
    parser.add_argument(
        "--name", "-n",
        help="Theme name (default: image file name without extension)",
    )
    parser.add_argument(
        "--mode", "-m",
        choices=[m.value for m in ThemeMode],
        default=None,
        help="Force dark or light mode (default: detect from the image)",
    )
    target = parser.add_mutually_exclusive_group()
    target.add_argument(
        "--output", "-o",
        metavar="PATH",
        help="Write the theme to this file instead of stdout",
    )
    target.add_argument(
        "--install",
        action="store_true",
        help="Install the theme into the application's config directory",
    )
    parser.add_argument(
        "--no-clobber",
        action="store_true",
        help="Fail instead of overwriting an existing theme file",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Print a colored preview and readability report to stderr",
    )
    parser.add_argument(
        "--interactive", "--tui",
        action="store_true",
        help="Refine the palette interactively before saving",
    )
    parser.add_argument(
        "--colors", "-k",
        type=int,
        default=DEFAULT_CLUSTER_COUNT,
        help=f"Number of colors to extract (default: {DEFAULT_CLUSTER_COUNT})",
    )
    parser.add_argument(
        "--min-contrast",
        type=float,
        default=DEFAULT_ACCENT_CONTRAST,
        help=f"Minimum accent contrast against the background, 1-21 (default: {DEFAULT_ACCENT_CONTRAST})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_SEED,
        help=f"Clustering seed (default: {DEFAULT_SEED})",
    )
    parser.add_argument(
        "--backend", "-b",
        choices=sorted(BACKENDS),
        default="ghostty",
        help="Theme format (default: ghostty)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log progress")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _make_saver(args, backend, theme_name):
    """Return a callable that persists a palette where the arguments ask for."""
    if args.install:
        config_home = resolve_config_home()

        def save(palette):
            return backend.install(palette, theme_name, config_home, no_clobber=args.no_clobber)

    elif args.output:

        def save(palette):
            return backend.write_to(palette, theme_name, args.output, no_clobber=args.no_clobber)

    else:
        save = None
    return save


def _run_interactive(args, pixels, mode, min_contrast, backend, theme_name, save):
    from .interactive import run
    from .session import RefinementSession

    if save is None:
        default_path = f"{theme_name}{backend.extension}"

        def save(palette):
            return backend.write_to(palette, theme_name, default_path, no_clobber=args.no_clobber)

    session = RefinementSession(
        pixels, k=args.colors, mode=mode, min_contrast=min_contrast, seed=args.seed
    )
    run(session, backend, theme_name, save)


def main(argv=None):
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="nuri: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    if args.colors < 1:
        parser.error("--colors must be at least 1")

    theme_name = args.name or os.path.splitext(os.path.basename(args.image_path))[0]
    mode = ThemeMode(args.mode) if args.mode else None
    min_contrast = clamp_min_contrast(args.min_contrast)
    backend = get_backend(args.backend)
    save = _make_saver(args, backend, theme_name)

    try:
        logger.info("analyzing %s", args.image_path)
        pixels = load_and_prepare(args.image_path)

        if args.interactive:
            _run_interactive(args, pixels, mode, min_contrast, backend, theme_name, save)
            return 0

        palette, _, mode = generate_palette(
            pixels, k=args.colors, mode=mode, min_contrast=min_contrast, seed=args.seed
        )

        if args.preview:
            print_palette(palette, mode, file=sys.stderr)
            report, _ = generate_readability_report(palette, mode, min_contrast=min_contrast)
            print("\n" + report, file=sys.stderr)

        if save is None:
            sys.stdout.write(backend.serialize(palette, theme_name))
        else:
            path = save(palette)
            print(f"Wrote {backend.name} theme '{theme_name}' to {path}", file=sys.stderr)
    except NuriError as e:
        print(f"nuri: error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

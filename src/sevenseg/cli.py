#!/usr/bin/env python3
"""
sevenseg - Command Line Interface

Entry point for the sevenseg package.
"""

import argparse
import logging
import sys

from sevenseg.__version__ import __version__

log = logging.getLogger(__name__)


def _setup_logging(verbose=0):
    """Configure logging based on -v count (filter out noisy PIL)."""
    if verbose >= 2:
        logging.basicConfig(level=logging.DEBUG, format='[%(levelname)s] %(name)s: %(message)s')
        logging.getLogger('PIL').setLevel(logging.WARNING)
    elif verbose == 1:
        logging.basicConfig(level=logging.INFO, format='[%(levelname)s] %(message)s')
    else:
        logging.basicConfig(level=logging.WARNING)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="sevenseg",
        description="Seven-segment display renderer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    sevenseg encode "HELLO"            Show segment masks per character
    sevenseg render 12.5 -o out.png    Render a readout to PNG
    sevenseg render 42 --skew traditional --color orange -o 42.png
    sevenseg geometry --width 90 --height 160
    sevenseg config --color 00ff00     Change the default color
    sevenseg gui "HELLO hello"         Show a readout in a window
        """
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v, -vv)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Encode command
    encode_parser = subparsers.add_parser("encode", help="Show segment encoding of text")
    encode_parser.add_argument("text", help="Text to encode")
    encode_parser.add_argument("--strict", action="store_true",
                               help="Don't fall back to the other letter case")

    # Render command
    render_parser = subparsers.add_parser("render", help="Render text to an image file")
    render_parser.add_argument("text", help="Text to render")
    render_parser.add_argument("--output", "-o", required=True, help="Output image path")
    render_parser.add_argument("--color", "-c", help="Segment color (hex or name)")
    render_parser.add_argument("--background", "-b", help="Background color (hex or name)")
    render_parser.add_argument("--skew", "-s", help="none, traditional, or a shear factor")
    render_parser.add_argument("--width", type=int, help="Image width in pixels")
    render_parser.add_argument("--height", type=int, help="Image height in pixels")

    # Geometry command
    geom_parser = subparsers.add_parser("geometry", help="Print segment frames and outlines")
    geom_parser.add_argument("--width", type=float, default=90.0, help="Frame width")
    geom_parser.add_argument("--height", type=float, default=160.0, help="Frame height")

    # Config command
    config_parser = subparsers.add_parser("config", help="Show or change defaults")
    config_parser.add_argument("--color", help="Default segment color")
    config_parser.add_argument("--skew", help="Default skew")
    config_parser.add_argument("--height", type=float, help="Default image height")

    # GUI command
    gui_parser = subparsers.add_parser("gui", help="Show text in a window")
    gui_parser.add_argument("text", help="Text to show")
    gui_parser.add_argument("--color", "-c", help="Segment color")
    gui_parser.add_argument("--skew", "-s", help="none, traditional, or a shear factor")

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "encode":
        return encode_text(args.text, strict=args.strict)
    elif args.command == "render":
        return render_text(args.text, args.output, color=args.color,
                           background=args.background, skew=args.skew,
                           width=args.width, height=args.height)
    elif args.command == "geometry":
        return show_geometry(args.width, args.height)
    elif args.command == "config":
        return configure(color=args.color, skew=args.skew, height=args.height)
    elif args.command == "gui":
        return gui(args.text, color=args.color, skew=args.skew)

    return 0


def _format_state(state):
    """'0b00111111  TOP TOP_RIGHT ...' for a DisplayState."""
    names = " ".join(seg.name for seg in state) or "(blank)"
    return f"{state.mask:#010b}  {names}"


def encode_text(text, strict=False):
    """Print the segment mask of every character in ``text``."""
    try:
        from sevenseg.encoding import encode

        for ch in text:
            state = encode(ch, allow_case_toggle=not strict)
            if state is None:
                print(f"{ch!r:>5}  ?           (not representable, shown blank)")
            else:
                print(f"{ch!r:>5}  {_format_state(state)}")
        return 0
    except Exception as e:
        print(f"Error: {e}")
        return 1


def render_text(text, output, color=None, background=None, skew=None,
                width=None, height=None):
    """Render ``text`` as a readout image and save it."""
    try:
        from sevenseg.conf import Settings
        from sevenseg.image_renderer import ImageRenderer

        settings = Settings()
        renderer = ImageRenderer(
            background=background if background is not None else settings.background,
            aspect_ratio=settings.aspect_ratio,
            height=height or settings.height,
        )
        size = renderer.default_size(len(text))
        if width:
            size = (width, size[1])

        img = renderer.render_readout(
            text, size,
            color=color if color is not None else settings.color,
            skew=skew if skew is not None else settings.skew,
        )
        path = renderer.save(img, output)
        print(f"Wrote {path} ({img.width}x{img.height})")
        return 0
    except Exception as e:
        print(f"Error: {e}")
        return 1


def show_geometry(width, height):
    """Print every segment's frame and outline for a frame of the given size."""
    try:
        from sevenseg.geometry import Size, geometry, stroke_thickness
        from sevenseg.segments import Segment

        parent = Size(width, height)
        print(f"Frame {width:g}x{height:g}, stroke {stroke_thickness(parent):g}")
        for segment in Segment:
            geo = geometry(segment, parent)
            frame = geo.frame
            print(f"  {segment.name:<12} {segment.kind.value:<10} "
                  f"at ({frame.x:g}, {frame.y:g}) size {frame.width:g}x{frame.height:g}")
            if geo.shape.is_ellipse:
                print("               ellipse")
            else:
                pts = " ".join(f"({p.x:g},{p.y:g})" for p in geo.shape.outline())
                print(f"               {pts}")
        return 0
    except Exception as e:
        print(f"Error: {e}")
        return 1


def configure(color=None, skew=None, height=None):
    """Update any given defaults, then print the current settings."""
    try:
        from sevenseg.conf import CONFIG_PATH, Settings

        settings = Settings()
        if color is not None:
            settings.set_color(color)
        if skew is not None:
            settings.set_skew(skew)
        if height is not None:
            settings.set_height(height)

        print(f"Config: {CONFIG_PATH}")
        for key, value in settings.as_dict().items():
            print(f"  {key:<13} {value}")
        return 0
    except Exception as e:
        print(f"Error: {e}")
        return 1


def gui(text, color=None, skew=None):
    """Show ``text`` in a Qt window."""
    try:
        from sevenseg.qt_components.preview_app import run_preview_app
        return run_preview_app(text, color=color, skew=skew)
    except ImportError as e:
        print(f"Error: PyQt6 not available: {e}")
        print("Install with: pip install PyQt6")
        return 1
    except Exception as e:
        print(f"Error launching GUI: {e}")
        log.debug("GUI failure", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())

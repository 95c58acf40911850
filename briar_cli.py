#!/usr/bin/env python3
"""Briar CLI - resolve layouts and inspect the theme configuration."""

import sys
import json
import logging
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from briar.core.contracts import RequestContext, VIEW_FLAGS
from briar.core.config_validator import ValidationError, load_validated_config, snapshot_config
from briar.core.theme import Theme

logger = logging.getLogger(__name__)


def setup_logging(log_level: str = "INFO"):
    """Configure logging for the CLI."""
    numeric_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )


def _load_theme(args) -> Theme:
    return Theme(load_validated_config(Path(args.config_dir))).setup()


def _request_from_args(args) -> RequestContext:
    return RequestContext.from_views(
        args.view,
        is_customize_preview=args.preview,
    )


def cmd_layout(args):
    """Resolve the layout and column classes of a view."""
    theme = _load_theme(args)
    request = _request_from_args(args)

    layout = theme.get_layout(request)
    main = theme.main_class(request)
    sidebar = theme.sidebar_class(request)

    if args.json:
        print(json.dumps({
            "views": args.view,
            "layout": layout.value,
            "main_classes": main,
            "sidebar_classes": sidebar,
        }, indent=2))
    else:
        print(f"Layout:  {layout.value}")
        print(f"Main:    {' '.join(main)}")
        print(f"Sidebar: {' '.join(sidebar) if sidebar is not None else '(none)'}")
    return 0


def cmd_thumbnail(args):
    """Show the thumbnail size used for a view."""
    theme = _load_theme(args)
    print(theme.thumbnail_size(args.size, _request_from_args(args)))
    return 0


def cmd_config(args):
    """Show configuration snapshot (parity with web /api/config/snapshot)."""
    theme = _load_theme(args)
    snapshot = snapshot_config(theme.config)

    if args.json:
        print(snapshot.to_json())
    else:
        print(f"Config Hash: {snapshot.config_hash}")
        print(f"Timestamp:   {snapshot.timestamp}")
        print(f"Title shim:  {'active' if theme.title_shim_active else 'inactive'}")
        print("Theme mods:")
        for name, value in sorted(snapshot.theme_config["theme_mods"].items()):
            print(f"  {name}: {value}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Briar theme helpers',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Layout of a search results page
  briar layout --view search --view archive

  # Thumbnail size on a single post
  briar thumbnail blog-post-image --view single

  # Current configuration
  briar config --json
        """
    )
    parser.add_argument('--config-dir', default='./config', help='Directory holding theme.yaml')
    parser.add_argument('--log-level', default='WARNING', help='Logging level')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    view_help = f"View predicate to set; repeatable. One of: {', '.join(VIEW_FLAGS)}"

    layout_parser = subparsers.add_parser('layout', help='Resolve the layout of a view')
    layout_parser.add_argument('--view', action='append', default=[], choices=list(VIEW_FLAGS), help=view_help)
    layout_parser.add_argument('--preview', action='store_true', help='Customizer preview')
    layout_parser.add_argument('--json', action='store_true', help='JSON output')
    layout_parser.set_defaults(func=cmd_layout)

    thumb_parser = subparsers.add_parser('thumbnail', help='Thumbnail size for a view')
    thumb_parser.add_argument('size', help='Requested image size')
    thumb_parser.add_argument('--view', action='append', default=[], choices=list(VIEW_FLAGS), help=view_help)
    thumb_parser.add_argument('--preview', action='store_true', help='Customizer preview')
    thumb_parser.set_defaults(func=cmd_thumbnail)

    config_parser = subparsers.add_parser('config', help='Show configuration snapshot')
    config_parser.add_argument('--json', action='store_true', help='JSON output')
    config_parser.set_defaults(func=cmd_config)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if not args.command:
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2


if __name__ == '__main__':
    sys.exit(main())

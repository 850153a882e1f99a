#!/usr/bin/env python3
"""
Wink Layout - command-line entry point.

Reads an HTML document and a stylesheet, lays the document out in a fixed
viewport and prints the resulting box tree.
"""

import argparse
import logging
import sys
from typing import List, Optional

from wink_layout.css import parse_css
from wink_layout.dom import parse_html
from wink_layout.errors import LayoutEngineError
from wink_layout.layout import LayoutEngine, format_layout_tree
from wink_layout.utils.config import Config
from wink_layout.utils.logging import get_default_log_file, log_exception, setup_logging

logger = logging.getLogger("wink_layout.main")

DEFAULT_LOG_FILE = "default"


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Wink Layout - lay out an HTML document with a CSS stylesheet")
    parser.add_argument('--html', default='examples/test.html', help='HTML document')
    parser.add_argument('--css', default='examples/test.css', help='CSS stylesheet')
    parser.add_argument('--width', type=float, default=None, help='Viewport width in px')
    parser.add_argument('--height', type=float, default=None, help='Viewport height in px')
    parser.add_argument('--config', type=str, default=None, help='Configuration file')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--log-file', nargs='?', const=DEFAULT_LOG_FILE, default=None,
                        help='Also log to a file (the default log file when no path is given)')
    return parser.parse_args(argv)


def read_source(filename: str) -> str:
    with open(filename, 'r', encoding='utf-8') as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line."""
    args = parse_arguments(argv)

    log_file = args.log_file
    if log_file == DEFAULT_LOG_FILE:
        log_file = get_default_log_file()

    try:
        config = Config(args.config)
    except LayoutEngineError as e:
        setup_logging(console_level="INFO")
        log_exception(logger, e, "Invalid configuration")
        return 1

    console_level = "DEBUG" if args.debug else config.get('logging.console_level', "INFO")
    setup_logging(log_file=log_file,
                  console_level=console_level,
                  file_level=config.get('logging.file_level', "DEBUG"))

    try:
        html = read_source(args.html)
        css = read_source(args.css)
    except OSError as e:
        log_exception(logger, e, "Cannot read input")
        return 2

    # Command-line sizes take precedence over the configured viewport
    if args.width is not None:
        config.set('viewport.width', args.width)
    if args.height is not None:
        config.set('viewport.height', args.height)

    try:
        root_node = parse_html(html)
        stylesheet = parse_css(css)
        engine = LayoutEngine(config)
        layout_root = engine.create_layout(root_node, stylesheet)
    except LayoutEngineError as e:
        log_exception(logger, e, "Layout failed")
        return 1

    print(format_layout_tree(layout_root))
    return 0


if __name__ == "__main__":
    sys.exit(main())

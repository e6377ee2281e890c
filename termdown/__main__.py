# __main__.py

import sys
import argparse
from typing import List, Optional

from .errors import RenderError
from .interface import Renderer
from .options import RenderOptions
from .highlight.engine import THEMES

def main(argv: Optional[List[str]] = None) -> int:
    defaults = RenderOptions.from_env()
    parser = argparse.ArgumentParser(prog='termdown', description='Render markdown for the terminal')
    parser.add_argument('files', nargs='*',
        help='Markdown files to render (default: read stdin)')
    parser.add_argument('-l', '--language',
        default=defaults.fallback_language,
        help='Language used to highlight indented code blocks')
    parser.add_argument('--theme',
        choices=THEMES,
        default=defaults.theme,
        help='Highlighting theme')
    parser.add_argument('--enable-logging',
        action='store_true',
        help='Enable debug logging')
    parser.add_argument('--log-file',
        help='Log file path (use "-" for stdout)')

    args = parser.parse_args(argv)

    renderer = Renderer(
        options=RenderOptions(fallback_language=args.language, theme=args.theme),
        logging_enabled=args.enable_logging,
        log_file=args.log_file
    )

    try:
        if args.files:
            for path in args.files:
                with open(path, encoding='utf-8') as f:
                    sys.stdout.write(renderer.render(f.read()))
        else:
            sys.stdout.write(renderer.render(sys.stdin.read()))
    except (OSError, RenderError) as e:
        print(f"termdown: {e}", file=sys.stderr)
        return 1
    sys.stdout.flush()
    return 0

if __name__ == "__main__":
    sys.exit(main())

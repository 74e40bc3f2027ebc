import argparse
import asyncio
import logging
import os
import sys

from rapidread.config import MAX_BLOCK_SIZE, MAX_RATE, ReaderConfig


def configure_logging(verbose: bool) -> None:
    from rich.logging import RichHandler

    from rapidread.ui.console import console

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=verbose)],
    )


def main():
    parser = argparse.ArgumentParser(
        description="RapidRead - speed reading in fixed-size word blocks"
    )
    parser.add_argument(
        "path", nargs="?", default=None,
        help="PDF or text file to read",
    )
    parser.add_argument(
        "--text", default=None,
        help="Read this text instead of a file",
    )
    parser.add_argument(
        "--block-size", "-w", type=int, default=3,
        help=f"Words per block, 1-{MAX_BLOCK_SIZE} (default: 3)",
    )
    parser.add_argument(
        "--rate", "-r", type=int, default=3,
        help=f"Blocks per second, 1-{MAX_RATE} (default: 3)",
    )
    parser.add_argument(
        "--autoplay", action="store_true",
        help="Start reading as soon as content is loaded",
    )
    parser.add_argument(
        "--no-stats", action="store_true",
        help="Don't show content statistics after loading",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Log playback transitions",
    )

    args = parser.parse_args()

    if args.path and args.text is not None:
        parser.error("give either a file path or --text, not both")
    if args.path and not os.path.exists(args.path):
        print(f"Error: file not found: {args.path}")
        sys.exit(1)

    configure_logging(args.verbose)

    config = ReaderConfig(
        block_size=args.block_size,
        rate=args.rate,
        autoplay=args.autoplay,
        show_stats=not args.no_stats,
    )
    asyncio.run(_run(config, args.path, args.text))


async def _run(config, path, text):
    from rapidread.app import ReaderApp
    from rapidread.session import ReaderSession
    from rapidread.ui.console import console
    from rapidread.ui.input_prompt import RichInput
    from rapidread.ui.renderer import VisualRenderer

    session = ReaderSession(config)
    app = ReaderApp(
        session, RichInput(console), renderer=VisualRenderer(console), config=config
    )
    if path:
        await app.open_path(path)
    elif text is not None:
        app.load_text(text)
    await app.run()


if __name__ == "__main__":
    main()

import sys
from collections.abc import Sequence

from catboard.cli.runner import build_parser, describe_copy, run
from catboard.clipboard.base import BaseClipboard
from catboard.clipboard.system_clipboard import SystemClipboard
from catboard.config.settings import Settings
from catboard.extraction.exceptions import CatboardError
from catboard.extraction.pipeline import ExtractionPipeline, build_pipeline
from catboard.logging.logger import Log

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def main(
    argv: Sequence[str] | None = None,
    pipeline: ExtractionPipeline | None = None,
    clipboard: BaseClipboard | None = None,
) -> int:
    """Entry point: parse args -> configure logging -> extract -> copy."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(Log.level_for(args.verbose, args.quiet, settings.log_level))

    try:
        if pipeline is None:
            pipeline = build_pipeline(settings)
        combined = run(
            args.files,
            pipeline=pipeline,
            clipboard=clipboard if clipboard is not None else SystemClipboard(),
        )
    except CatboardError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    if not args.quiet:
        print(describe_copy(args.files, combined), file=sys.stderr)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())

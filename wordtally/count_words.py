"""
Word counting script for PDF documents.

This script:
1. Loads the selected pages of a PDF (optionally cropped)
2. Loads the exclusion list and a previous report to merge with
3. Counts the words, optionally dumping the page text to a file
4. Prints the words ordered by frequency

Usage:
    wordtally book.pdf -F common_words.txt -M old_words.txt -K > new_words.txt
"""
import argparse
import logging
import sys
from contextlib import ExitStack
from pathlib import Path
from typing import List, Optional, TextIO

from . import __version__
from .config import LOG_FORMAT, LOG_LEVEL, TEXT_ENCODING
from .errors import DUMP_UNWRITABLE, InputError, InputFileError
from .logger import setup_logging
from .models.document import CropBox
from .services.document_loader import DocumentLoader
from .services.report_writer import write_report
from .services.word_counter import WordCounter
from .services.word_lists import load_filter, load_merge

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser; -H is the crop height, so help is --help only."""
    parser = argparse.ArgumentParser(
        prog="wordtally",
        description="Count distinct words in a PDF document, most frequent first",
        add_help=False
    )
    parser.add_argument("--help", action="help", help="show this help message and exit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    
    parser.add_argument("input_file", nargs="?", help="input PDF file")
    parser.add_argument("-I", "--input-file", dest="input_option", metavar="PATH", help="input PDF file")
    parser.add_argument("-T", "--text", metavar="PATH", help="write the text content of the input PDF to this file")
    parser.add_argument(
        "-F", "--filter-file",
        metavar="PATH",
        help="text file, list of words to be excluded from the output"
    )
    parser.add_argument(
        "-M", "--merge-file",
        metavar="PATH",
        help="previous output of this tool to be merged with the output"
    )
    parser.add_argument(
        "-K", "--keep-count",
        action="store_true",
        help="keep word counts from the merge file instead of resetting them to 0"
    )
    
    pages = parser.add_argument_group("page selection")
    pages.add_argument("-S", "--start-page", type=int, help="start page (0-based)")
    pages.add_argument("-C", "--pages-count", type=int, help="pages count")
    
    crop = parser.add_argument_group("crop")
    crop.add_argument("-X", "--x", type=float, help="crop start x")
    crop.add_argument("-Y", "--y", type=float, help="crop start y")
    crop.add_argument("-W", "--width", type=float, help="crop width")
    crop.add_argument("-H", "--height", type=float, help="crop height")
    
    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help=f"log level (default: {LOG_LEVEL})"
    )
    logging_group.add_argument(
        "--json-logs",
        action="store_true",
        default=LOG_FORMAT == "json",
        help="log as JSON lines"
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    
    if args.input_file and args.input_option:
        parser.error("give the input file either positionally or with -I, not both")
    args.input_file = args.input_file or args.input_option
    if not args.input_file:
        parser.error("the following arguments are required: input_file")
    return args


def run(args: argparse.Namespace, stdout: Optional[TextIO] = None) -> int:
    """
    Count the words of the document described by the parsed arguments.
    
    Every input is loaded before anything is written, so a bad input
    never leaves a partial report behind.
    
    Returns:
        Number of report rows written
        
    Raises:
        InputFileError: If any input cannot be loaded
    """
    crop = CropBox(x=args.x, y=args.y, width=args.width, height=args.height)

    with ExitStack() as stack:
        document = stack.enter_context(DocumentLoader().open_document(
            args.input_file,
            start_page=args.start_page,
            pages_count=args.pages_count,
            crop=crop
        ))
        exclusions = load_filter(args.filter_file)
        merge_table = load_merge(args.merge_file, keep_count=args.keep_count)

        counter = WordCounter(
            exclusions=exclusions,
            initial_counts=merge_table.counts,
            annotations=merge_table.annotations
        )

        text_sink = None
        if args.text:
            text_path = Path(args.text).expanduser()
            try:
                text_sink = stack.enter_context(open(text_path, "w", encoding=TEXT_ENCODING))
            except OSError as e:
                raise InputFileError(InputError(
                    code=DUMP_UNWRITABLE,
                    message=f"Failed to open text file {text_path}",
                    details={"path": str(text_path), "reason": str(e)}
                )) from e
        counter.count_pages(document.pages, text_sink=text_sink)
    
    return write_report(counter.report(), stdout or sys.stdout)


def main(argv: Optional[List[str]] = None) -> int:
    """Command line entry point."""
    args = parse_args(argv)
    setup_logging(args.log_level, json_format=args.json_logs)
    
    try:
        rows = run(args)
        logger.info(f"Wrote {rows} words")
        return 0
    except InputFileError as e:
        reason = e.error.details.get("reason")
        logger.error(f"{e.error.message}: {reason}" if reason else e.error.message)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    sys.exit(main())

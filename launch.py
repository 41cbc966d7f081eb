"""
launch.py - Word Count Entry Point

Main entry point for the word counter.
Handles configuration loading, input selection, error reporting
and printing of the ranked words.

Usage:
    python launch.py < notes.txt              # Count words read from stdin
    python launch.py notes.txt                # Count words in a file
    python launch.py page.html --html         # Count visible words of a page
    python launch.py notes.txt --top 50 --format quoted
    python launch.py notes.txt --format json --output counts.json
"""

import sys
from configparser import ConfigParser, Error as ConfigParserError
from argparse import ArgumentParser

from utils import get_logger
from utils.config import Config, ConfigError
from wordcount import WordCounter
from wordcount.report import STYLES, write_report


def build_parser():
    parser = ArgumentParser(
        prog="wordfreq",
        description="Count words and list them by descending frequency.")
    parser.add_argument("input", nargs="?", default="-",
                        help="Text file to read (default: stdin)")
    parser.add_argument("--config_file", type=str, default="config.ini",
                        help="Path to configuration file")
    parser.add_argument("--format", choices=STYLES, default=None,
                        help="Output format (overrides OUTPUT.FORMAT)")
    parser.add_argument("--top", type=int, default=None,
                        help="Only print the N most frequent words (0 for all)")
    parser.add_argument("--html", action="store_true", default=None,
                        help="Count only the visible text of an HTML document")
    parser.add_argument("--output", type=str, default=None,
                        help="Write the report to a file instead of stdout")
    return parser


def load_config(config_file, args):
    """
    Read the config file and apply command-line overrides.

    Raises:
        ConfigError: if a value in the file or on the command line is invalid
    """
    cparser = ConfigParser()
    try:
        cparser.read(config_file)
    except ConfigParserError as e:
        raise ConfigError(f"Could not parse {config_file}: {e}") from e
    config = Config(cparser)

    if args.format is not None:
        config.output_format = args.format
    if args.top is not None:
        if args.top < 0:
            raise ConfigError(f"--top must not be negative, got {args.top}")
        config.top = args.top
    if args.html:
        config.markup = True
    return config


def count_input(counter, path):
    """Count words from a path, or from stdin when path is '-'."""
    if path == "-":
        return counter.count(sys.stdin.buffer)
    with open(path, "rb") as f:
        return counter.count(f)


def write_output(words, config, output_path):
    if output_path is None:
        write_report(words, sys.stdout, config.output_format, config.top)
        return
    with open(output_path, "w", encoding="utf-8") as f:
        write_report(words, f, config.output_format, config.top)


def main(argv=None):
    """
    Count the words of one input and print them, most frequent first.

    Returns:
        0 on success, 1 when the input, output or config can't be used
    """
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config_file, args)
    except ConfigError as e:
        # no usable LOGDIR yet, console only
        get_logger("LAUNCH").error(f"Invalid configuration: {e}")
        return 1

    logger = get_logger("LAUNCH", log_dir=config.log_dir)
    counter = WordCounter(config)
    source = "stdin" if args.input == "-" else args.input

    try:
        words = count_input(counter, args.input)
    except FileNotFoundError:
        logger.error(f"File not found: {source}")
        return 1
    except PermissionError:
        logger.error(f"Permission denied: {source}")
        return 1
    except IsADirectoryError:
        logger.error(f"Is a directory: {source}")
        return 1
    except OSError as e:
        logger.error(f"Failed to read {source}: {e}")
        return 1

    try:
        write_output(words, config, args.output)
    except OSError as e:
        logger.error(f"Failed to write report: {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

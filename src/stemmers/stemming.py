"""
Command-line runner shared by all stemmers.

Pipeline:
1. Consume runner options (-h, -i, -o, -l)
2. Hand the remaining options to the stemmer (set_options)
3. Reject anything left over
4. Read input line by line, stem every whitespace-separated word
5. Write stemmed lines (words joined by single spaces)

Runner options:
    -h           Print option summary and exit
    -i <file>    Input file (default: stdin)
    -o <file>    Output file (default: stdout)
    -l           Lowercase input before stemming
"""

import logging
import sys
from contextlib import ExitStack
from typing import IO, Iterable, Iterator, List, Optional

from ..config import load_environment
from ..logging_config import setup_logging
from .base import BaseStemmer
from .options import (
    Option,
    StemmerError,
    check_for_remaining_options,
    get_flag,
    get_option,
)

logger = logging.getLogger(__name__)

RUNNER_OPTIONS = [
    Option("h", "This help.", 0, "-h"),
    Option("i", "The file to process\n(default: stdin).", 1, "-i <input-file>"),
    Option("o", "The file to output the processed data to\n(default: stdout).", 1, "-o <output-file>"),
    Option("l", "Uses lowercase strings.", 0, "-l"),
]


def make_options_string(stemmer: BaseStemmer) -> str:
    """Build the -h text: runner options followed by the stemmer's own."""
    lines = ["", "General options:", ""]
    for option in RUNNER_OPTIONS:
        lines.append(option.synopsis)
        lines.extend(f"\t{line}" for line in option.description.split("\n"))
    
    stemmer_options = stemmer.list_options()
    if stemmer_options:
        lines.extend(["", f"Stemmer options ({stemmer}):", ""])
        for option in stemmer_options:
            lines.append(option.synopsis)
            lines.extend(f"\t{line}" for line in option.description.split("\n"))
    
    return "\n".join(lines) + "\n"


def stem_lines(stemmer: BaseStemmer, lines: Iterable[str], lowercase: bool = False) -> Iterator[str]:
    """
    Stem every word of every line.
    
    Args:
        stemmer: Configured stemmer
        lines: Input lines (trailing newlines are ignored)
        lowercase: Lowercase each line before stemming
        
    Yields:
        Stemmed lines without trailing newline
        
    Examples:
        >>> list(stem_lines(FixedLengthStemmer(3), ["hello  world\\n"]))
        ['hel wor']
    """
    for line in lines:
        line = line.rstrip("\r\n")
        if lowercase:
            line = line.lower()
        yield " ".join(stemmer.stem(word) for word in line.split())


def use_stemmer(stemmer: BaseStemmer, args: List[str], stdin: Optional[IO[str]] = None, stdout: Optional[IO[str]] = None) -> None:
    """
    Configure a stemmer from args and run it over the input.
    
    Args:
        stemmer: Stemmer to run
        args: Command-line options (consumed in place)
        stdin: Input stream used when -i is absent (default: sys.stdin)
        stdout: Output stream used when -o is absent (default: sys.stdout)
        
    Raises:
        OptionError: Unknown or malformed options
        ConfigurationParseError: Stemmer option value could not be parsed
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    
    if get_flag("h", args):
        stdout.write(make_options_string(stemmer))
        return
    
    input_file = get_option("i", args)
    output_file = get_option("o", args)
    lowercase = get_flag("l", args)
    
    stemmer.set_options(args)
    check_for_remaining_options(args)
    logger.debug(f"Running {stemmer} with options {stemmer.get_options()}")
    
    with ExitStack() as stack:
        reader = stack.enter_context(open(input_file, encoding="utf-8")) if input_file else stdin
        writer = stack.enter_context(open(output_file, "w", encoding="utf-8")) if output_file else stdout
        
        count = 0
        for stemmed in stem_lines(stemmer, reader, lowercase=lowercase):
            writer.write(stemmed + "\n")
            count += 1
        writer.flush()
    
    logger.debug(f"Stemmed {count} lines")


def run_stemmer(stemmer: BaseStemmer, argv: Optional[List[str]] = None) -> int:
    """
    Entry point body for stemmer scripts.
    
    Configures logging, runs use_stemmer() and turns failures into a
    logged traceback plus exit status 1.
    """
    load_environment()
    setup_logging()
    
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        use_stemmer(stemmer, args)
    except (StemmerError, OSError, UnicodeDecodeError) as e:
        logger.exception(f"Stemming failed: {e}")
        return 1
    return 0

"""
Fixed-length stemmer.

Crude but language-independent: the stem of a word is simply its first
N characters (default 7). Words that already fit are returned unchanged.

Examples (default length 7):
- "information" → "informa"
- "stemming"    → "stemmin"
- "cat"         → "cat"

Run standalone:
    fixstemmer -stemmlength 5 -i words.txt
"""

import logging
import sys
from typing import List, Optional

from .base import BaseStemmer
from .stemming import run_stemmer
from .options import Option, get_option, parse_int_option

logger = logging.getLogger(__name__)

DEFAULT_LENGTH = 7


class FixedLengthStemmer(BaseStemmer):
    """Stemmer that truncates words to a fixed maximum length."""
    
    def __init__(self, max_length: int = DEFAULT_LENGTH):
        self.max_length = max_length
    
    def configure(self, max_length: int) -> None:
        """Set the truncation bound (not validated: 0 and negatives are stored as given)."""
        self.max_length = max_length
        logger.debug(f"Stem length set to {max_length}")
    
    def get_max_length(self) -> int:
        return self.max_length
    
    # Option-style accessors used by the generic option machinery
    set_stemmlength = configure
    get_stemmlength = get_max_length
    
    def stemmlength_tip_text(self) -> str:
        return "Maximum number of characters kept from each word."
    
    def global_info(self) -> str:
        return "A simple stemmer that performs a fix length stemming."
    
    describe = global_info
    
    def stem(self, word: str) -> str:
        """
        Truncate word to the configured length.
        
        Non-positive lengths degenerate to the empty string.
        
        Examples:
            >>> FixedLengthStemmer().stem("information")
            'informa'
            >>> FixedLengthStemmer(3).stem("cat")
            'cat'
        """
        if len(word) <= self.max_length:
            return word
        return word[:max(self.max_length, 0)]
    
    apply = stem
    
    def list_options(self) -> List[Option]:
        return [
            Option(
                name="stemmlength",
                description=f"Length of the stemm\n(default {DEFAULT_LENGTH}).",
                num_arguments=1,
                synopsis="-stemmlength <value>",
            )
        ]
    
    def get_options(self) -> List[str]:
        return ["-stemmlength", str(self.get_stemmlength())]
    
    def set_options(self, options: List[str]) -> None:
        """
        Consume -stemmlength from the option list.
        
        Missing or empty value resets the length to the default.
        
        Raises:
            ConfigurationParseError: value is not an integer
        """
        value = get_option("stemmlength", options)
        if value:
            self.set_stemmlength(parse_int_option("stemmlength", value))
        else:
            self.set_stemmlength(DEFAULT_LENGTH)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the fixed-length stemmer over text (see stemming.use_stemmer)."""
    return run_stemmer(FixedLengthStemmer(), argv)


if __name__ == "__main__":
    sys.exit(main())

"""Stemmer that leaves every word as it is (useful as a no-op baseline)."""

import sys
from typing import List, Optional

from .base import BaseStemmer
from .stemming import run_stemmer


class NullStemmer(BaseStemmer):
    """Returns the word unchanged."""
    
    def global_info(self) -> str:
        return "A dummy stemmer that performs no stemming at all."
    
    def stem(self, word: str) -> str:
        return word


def main(argv: Optional[List[str]] = None) -> int:
    return run_stemmer(NullStemmer(), argv)


if __name__ == "__main__":
    sys.exit(main())

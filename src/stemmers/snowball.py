"""
Snowball stemmer (via NLTK).

Uses the Snowball stemming algorithm (improved Porter2 stemmer):
https://snowballstem.org/

Snowball is more accurate than original Porter stemmer:
- Better handling of word endings
- More consistent stem generation
- Available for many languages (-language option)

Examples (english):
- "architectures" → "architectur"
- "strategies" → "strategi"
- "running" → "run"
"""

import logging
import sys
from typing import List, Optional

from nltk.stem.snowball import SnowballStemmer as _NltkSnowballStemmer

from .base import BaseStemmer
from .stemming import run_stemmer
from .options import ConfigurationParseError, Option, get_option

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "english"


class SnowballStemmer(BaseStemmer):
    """
    Linguistic stemmer backed by NLTK's Snowball implementation.
    
    The NLTK stemmer is created on first use and recreated when the
    language changes.
    """
    
    def __init__(self, language: str = DEFAULT_LANGUAGE):
        self._stemmer = None  # Lazy loading
        self.set_language(language)
    
    def set_language(self, language: str) -> None:
        language = language.lower()
        if language not in _NltkSnowballStemmer.languages:
            raise ConfigurationParseError(
                "language", language, reason="unsupported Snowball language"
            )
        self.language = language
        self._stemmer = None
        logger.debug(f"Snowball language set to {language}")
    
    def get_language(self) -> str:
        return self.language
    
    def _ensure_loaded(self):
        if self._stemmer is None:
            self._stemmer = _NltkSnowballStemmer(self.language)
        return self._stemmer
    
    def global_info(self) -> str:
        return "Snowball stemmer (NLTK) for the configured language."
    
    def stem(self, word: str) -> str:
        """
        Stem a single word using Snowball algorithm.
        
        Examples:
            >>> SnowballStemmer().stem("searching")
            'search'
        """
        return self._ensure_loaded().stem(word)
    
    def list_options(self) -> List[Option]:
        return [
            Option(
                name="language",
                description=f"Snowball language\n(default {DEFAULT_LANGUAGE}).",
                num_arguments=1,
                synopsis="-language <name>",
            )
        ]
    
    def get_options(self) -> List[str]:
        return ["-language", self.language]
    
    def set_options(self, options: List[str]) -> None:
        value = get_option("language", options)
        self.set_language(value or DEFAULT_LANGUAGE)


def main(argv: Optional[List[str]] = None) -> int:
    return run_stemmer(SnowballStemmer(), argv)


if __name__ == "__main__":
    sys.exit(main())

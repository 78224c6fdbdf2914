"""
Stemmers for text normalization.

Usage:
    # Get stemmer (auto-configured from env):
    from src.stemmers import get_stemmer
    
    stemmer = get_stemmer()
    stems = [stemmer.stem(w) for w in words]
    
    # Or create specific implementation:
    from src.stemmers import FixedLengthStemmer
    
    stemmer = FixedLengthStemmer()
    stemmer.set_options(["-stemmlength", "5"])
    stemmer.stem("information")  # 'infor'
"""

from .base import BaseStemmer
from .options import (
    ConfigurationParseError,
    Option,
    OptionError,
    StemmerError,
)
from .fixed_length import FixedLengthStemmer
from .null import NullStemmer
from .snowball import SnowballStemmer
from .factory import StemmerFactory


def get_stemmer(force_reload: bool = False) -> BaseStemmer:
    """Get configured stemmer instance (factory convenience function)."""
    return StemmerFactory.create(force_reload=force_reload)


__all__ = [
    'BaseStemmer',
    'Option',
    'StemmerError',
    'OptionError',
    'ConfigurationParseError',
    'FixedLengthStemmer',
    'NullStemmer',
    'SnowballStemmer',
    'StemmerFactory',
    'get_stemmer',
]

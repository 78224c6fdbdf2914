"""
Factory to create stemmer instances based on configuration.
"""

import logging
import os
import shlex
from typing import Dict, Optional, Type

from .base import BaseStemmer
from .fixed_length import FixedLengthStemmer
from .null import NullStemmer
from .options import OptionError, check_for_remaining_options
from .snowball import SnowballStemmer

logger = logging.getLogger(__name__)

STEMMER_TYPES: Dict[str, Type[BaseStemmer]] = {
    "fixed": FixedLengthStemmer,
    "null": NullStemmer,
    "snowball": SnowballStemmer,
}


class StemmerFactory:
    """Factory to create stemmer instances based on configuration."""
    
    _instance: Optional[BaseStemmer] = None  # Singleton cache
    
    @classmethod
    def create(cls, stemmer_type: Optional[str] = None, options: Optional[str] = None, force_reload: bool = False) -> BaseStemmer:
        """
        Create stemmer from arguments or environment configuration.
        
        Config (env vars, used when the argument is None):
            STEMMER_TYPE: "fixed" | "null" | "snowball" (default: fixed)
            STEMMER_OPTIONS: Option string, e.g. "-stemmlength 5"
        
        Args:
            stemmer_type: Stemmer type name
            options: Option string passed to set_options()
            force_reload: If True, recreate instance even if cached
            
        Returns:
            Configured stemmer instance
            
        Raises:
            OptionError: Unknown type or invalid options
        """
        explicit = stemmer_type is not None or options is not None
        if cls._instance is not None and not force_reload and not explicit:
            logger.debug(f"Returning cached stemmer instance: {cls._instance}")
            return cls._instance
        
        if stemmer_type is None:
            stemmer_type = os.getenv("STEMMER_TYPE") or "fixed"
        if options is None:
            options = os.getenv("STEMMER_OPTIONS", "")
        stemmer_type = stemmer_type.lower()
        
        stemmer_class = STEMMER_TYPES.get(stemmer_type)
        if stemmer_class is None:
            raise OptionError(
                f"Unknown stemmer type: {stemmer_type}. "
                f"Valid options: {', '.join(STEMMER_TYPES)}"
            )
        
        stemmer = stemmer_class()
        args = shlex.split(options)
        try:
            stemmer.set_options(args)
            check_for_remaining_options(args)
        except OptionError as e:
            logger.error(f"Failed to configure stemmer ({stemmer_type}): {e}")
            raise
        
        logger.info(f"Created {stemmer_type} stemmer with options {stemmer.get_options()}")
        if not explicit:
            cls._instance = stemmer
        return stemmer
    
    @classmethod
    def cleanup(cls):
        """Drop cached stemmer instance."""
        cls._instance = None

"""
Abstract base class for stemmer implementations.

All stemmers must implement this interface to be swappable
(the runner and the factory only talk to BaseStemmer).
"""

from abc import ABC, abstractmethod
from typing import List

from .options import Option


class BaseStemmer(ABC):
    """
    Abstract base class for stemmer implementations.
    
    Stemmers without options can rely on the default (empty)
    option handling.
    """
    
    @abstractmethod
    def stem(self, word: str) -> str:
        """
        Reduce a word to its stem.
        
        Args:
            word: Word to stem
            
        Returns:
            Stemmed word (never raises for any string)
        """
        pass
    
    @abstractmethod
    def global_info(self) -> str:
        """Human-readable description of the stemmer"""
        pass
    
    def list_options(self) -> List[Option]:
        """Options understood by set_options()"""
        return []
    
    def get_options(self) -> List[str]:
        """Current settings as an option list (round-trips through set_options)"""
        return []
    
    def set_options(self, options: List[str]) -> None:
        """
        Set (or reset to defaults) all options from the given list.
        
        Recognised options are removed from the list in place.
        """
        pass
    
    def get_stemmer_info(self) -> dict:
        """
        Get information about the stemmer.
        
        Returns:
            Dict with keys: name, description, options
        """
        return {
            "name": type(self).__name__,
            "description": self.global_info(),
            "options": self.get_options(),
        }
    
    def __str__(self) -> str:
        return f"{type(self).__module__}.{type(self).__name__}"

"""Unit test configuration - isolate tests from env files and cached stemmers"""

import pytest

from src.stemmers.factory import StemmerFactory


@pytest.fixture(autouse=True)
def clean_stemmer_environment(monkeypatch):
    """
    Remove stemmer env vars and the factory's cached instance.
    
    Tests that need configuration set it explicitly via monkeypatch.
    """
    for name in ("STEMMER_TYPE", "STEMMER_OPTIONS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    StemmerFactory.cleanup()
    yield
    StemmerFactory.cleanup()

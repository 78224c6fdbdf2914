"""
Unit tests for stemmer factory and the null/snowball variants.
"""

import pytest

from src.stemmers import (
    ConfigurationParseError,
    FixedLengthStemmer,
    NullStemmer,
    OptionError,
    SnowballStemmer,
    StemmerFactory,
    get_stemmer,
)

pytestmark = pytest.mark.unit


class TestStemmerFactory:
    
    def test_default_is_fixed_length(self):
        stemmer = get_stemmer()
        assert isinstance(stemmer, FixedLengthStemmer)
        assert stemmer.get_max_length() == 7
    
    def test_env_configuration(self, monkeypatch):
        monkeypatch.setenv("STEMMER_TYPE", "FIXED")
        monkeypatch.setenv("STEMMER_OPTIONS", "-stemmlength 5")
        stemmer = get_stemmer()
        assert stemmer.get_options() == ["-stemmlength", "5"]
    
    def test_cached_instance(self):
        assert get_stemmer() is get_stemmer()
        first = get_stemmer()
        assert get_stemmer(force_reload=True) is not first
    
    def test_explicit_arguments_bypass_cache(self):
        cached = get_stemmer()
        stemmer = StemmerFactory.create("null")
        assert isinstance(stemmer, NullStemmer)
        assert get_stemmer() is cached
    
    def test_unknown_type(self):
        with pytest.raises(OptionError, match="Unknown stemmer type"):
            StemmerFactory.create("porter")
    
    def test_bad_options(self, monkeypatch):
        monkeypatch.setenv("STEMMER_OPTIONS", "-stemmlength many")
        with pytest.raises(ConfigurationParseError):
            get_stemmer()
    
    def test_leftover_options(self):
        with pytest.raises(OptionError, match="-language"):
            StemmerFactory.create("fixed", "-language english")
    
    def test_snowball_with_language(self):
        stemmer = StemmerFactory.create("snowball", "-language german")
        assert isinstance(stemmer, SnowballStemmer)
        assert stemmer.get_language() == "german"


class TestNullStemmer:
    
    def test_returns_word_unchanged(self):
        stemmer = NullStemmer()
        assert stemmer.stem("information") == "information"
        assert stemmer.stem("") == ""
    
    def test_no_options(self):
        stemmer = NullStemmer()
        options = ["-x"]
        stemmer.set_options(options)
        assert options == ["-x"]
        assert stemmer.get_options() == []
        assert stemmer.list_options() == []


class TestSnowballStemmer:
    """Snowball stemming via NLTK"""
    
    @pytest.mark.parametrize("word,expected", [
        ("searching", "search"),
        ("running", "run"),
        ("strategies", "strategi"),
        ("architectures", "architectur"),
    ])
    def test_english(self, word, expected):
        assert SnowballStemmer().stem(word) == expected
    
    def test_lazy_loading(self):
        stemmer = SnowballStemmer()
        assert stemmer._stemmer is None
        stemmer.stem("running")
        assert stemmer._stemmer is not None
    
    def test_options_round_trip(self):
        stemmer = SnowballStemmer()
        stemmer.set_options(["-language", "French"])
        assert stemmer.get_options() == ["-language", "french"]
        stemmer.set_options([])
        assert stemmer.get_language() == "english"
    
    def test_unsupported_language(self):
        with pytest.raises(ConfigurationParseError, match="language"):
            SnowballStemmer("klingon")

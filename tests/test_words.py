"""Tests for the built-in word banks and presets."""

import pytest

from pairname.errors import UnknownPresetError
from pairname.words import (
    ADJECTIVES,
    DEFAULT_PRESET,
    MINIMAL_ADJECTIVES,
    MINIMAL_NAMES,
    PRESETS,
    SURNAMES,
    get_preset,
    preset_sizes,
)


class TestDefaultBank:
    """Test suite for the default adjective/surname bank."""

    def test_sizes(self):
        """Roughly 110 adjectives and 250 surnames."""
        assert 100 <= len(ADJECTIVES) <= 120
        assert 240 <= len(SURNAMES) <= 280

    def test_no_duplicates(self):
        assert len(set(ADJECTIVES)) == len(ADJECTIVES)
        assert len(set(SURNAMES)) == len(SURNAMES)

    @pytest.mark.parametrize("bank", [ADJECTIVES, SURNAMES], ids=["adjectives", "surnames"])
    def test_words_are_lowercase_ascii_letters(self, bank):
        for word in bank:
            assert word.isascii() and word.isalpha() and word.islower(), word

    def test_banks_are_immutable(self):
        assert isinstance(ADJECTIVES, tuple)
        assert isinstance(SURNAMES, tuple)


class TestPresets:
    """Test suite for preset lookup."""

    def test_default_preset_is_default_bank(self):
        assert DEFAULT_PRESET == "default"
        assert get_preset(DEFAULT_PRESET) == (ADJECTIVES, SURNAMES)

    def test_minimal_preset(self):
        assert get_preset("minimal") == (("crazy", "amazing"), ("steve", "alan", "einstein"))
        assert get_preset("minimal") == (MINIMAL_ADJECTIVES, MINIMAL_NAMES)

    def test_unknown_preset(self):
        with pytest.raises(UnknownPresetError) as exc_info:
            get_preset("docker")

        error_msg = str(exc_info.value)
        assert "docker" in error_msg
        assert "default" in error_msg
        assert "minimal" in error_msg

    def test_unknown_preset_is_key_error(self):
        with pytest.raises(KeyError):
            get_preset("docker")

    def test_presets_are_read_only(self):
        with pytest.raises(TypeError):
            PRESETS["extra"] = ((), ())

    def test_preset_sizes(self):
        sizes = preset_sizes()
        assert sizes["minimal"] == (2, 3)
        assert sizes["default"] == (len(ADJECTIVES), len(SURNAMES))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

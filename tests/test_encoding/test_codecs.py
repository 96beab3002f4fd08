"""Tests for codec lookup."""

import pytest

from dynamokv.encoding import CODECS, JSON, PICKLE, get_codec
from dynamokv.exceptions import ConfigError


class TestGetCodec:
    """Tests for get_codec."""

    def test_known_codecs(self):
        """Registered names resolve to the shared codec instances."""
        assert get_codec("json") is JSON
        assert get_codec("pickle") is PICKLE
        assert set(CODECS) == {"json", "pickle"}

    def test_unknown_codec(self):
        """Unknown names list the available codecs."""
        with pytest.raises(ConfigError, match="json, pickle"):
            get_codec("gob")

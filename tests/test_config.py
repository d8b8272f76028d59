"""
Tests for environment-driven settings.
"""
import logging

from mini_ipl.config import _get_env_int, _get_env_optional_int


class TestEnvParsing:
    def test_integer_value(self, monkeypatch):
        monkeypatch.setenv("OVERS_PER_INNINGS", " 4 ")
        assert _get_env_int("OVERS_PER_INNINGS", 2) == 4

    def test_unset_uses_default(self, monkeypatch):
        monkeypatch.delenv("OVERS_PER_INNINGS", raising=False)
        assert _get_env_int("OVERS_PER_INNINGS", 2) == 2

    def test_bad_integer_is_reported(self, monkeypatch, caplog):
        monkeypatch.setenv("OVERS_PER_INNINGS", "two")
        with caplog.at_level(logging.WARNING, logger="mini_ipl.config"):
            assert _get_env_int("OVERS_PER_INNINGS", 2) == 2
        assert "OVERS_PER_INNINGS" in caplog.text

    def test_bad_seed_is_reported(self, monkeypatch, caplog):
        monkeypatch.setenv("RANDOM_SEED", "lucky")
        with caplog.at_level(logging.WARNING, logger="mini_ipl.config"):
            assert _get_env_optional_int("RANDOM_SEED") is None
        assert "RANDOM_SEED" in caplog.text

    def test_blank_seed_means_unseeded(self, monkeypatch):
        monkeypatch.setenv("RANDOM_SEED", "")
        assert _get_env_optional_int("RANDOM_SEED") is None

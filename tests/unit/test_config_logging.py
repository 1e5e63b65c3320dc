"""
Unit tests for settings and logging configuration
"""
import logging

import pytest
import structlog
from pydantic import ValidationError

from furnirank.core.config import ScoringSettings, Settings
from furnirank.core.logging import get_log_level_for_env, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    structlog.reset_defaults()


class TestSettings:
    @pytest.mark.unit
    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.log_level == "INFO"
        assert settings.log_format == "json"

    @pytest.mark.unit
    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("FURNIRANK_ENVIRONMENT", "production")
        monkeypatch.setenv("FURNIRANK_LOG_LEVEL", "WARNING")

        settings = Settings(_env_file=None)

        assert settings.environment == "production"
        assert settings.log_level == "WARNING"

    @pytest.mark.unit
    def test_scoring_defaults(self):
        scoring = ScoringSettings(_env_file=None)

        assert scoring.max_recommendations == 20
        assert scoring.similarity_threshold == 0.3
        assert scoring.similar_items_limit == 5
        assert scoring.complementary_items_limit == 5
        assert scoring.trending_limit == 20
        assert scoring.favorite_weight == 2.0
        assert scoring.recent_weight == 1.0

    @pytest.mark.unit
    def test_scoring_env_override(self, monkeypatch):
        monkeypatch.setenv("FURNIRANK_SCORING_MAX_RECOMMENDATIONS", "7")
        assert ScoringSettings(_env_file=None).max_recommendations == 7

    @pytest.mark.unit
    def test_scoring_rejects_zero_limit(self):
        with pytest.raises(ValidationError):
            ScoringSettings(_env_file=None, max_recommendations=0)


class TestLogging:
    @pytest.mark.unit
    def test_console_setup(self, restore_root_logger):
        setup_logging(Settings(_env_file=None, log_level="DEBUG", log_format="console"))

        assert restore_root_logger.level == logging.DEBUG
        assert len(restore_root_logger.handlers) == 1

    @pytest.mark.unit
    def test_unknown_level_falls_back_to_info(self, restore_root_logger):
        setup_logging(Settings(_env_file=None, log_level="chatty"))
        assert restore_root_logger.level == logging.INFO

    @pytest.mark.unit
    def test_production_writes_files(self, restore_root_logger, tmp_path):
        setup_logging(Settings(_env_file=None, environment="production", log_dir=str(tmp_path / "logs")))

        assert len(restore_root_logger.handlers) == 3
        assert (tmp_path / "logs" / "furnirank.log").exists()
        assert (tmp_path / "logs" / "furnirank_errors.log").exists()

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "environment,expected",
        [("production", "INFO"), ("development", "DEBUG"), ("staging", "DEBUG")],
    )
    def test_log_level_for_env(self, environment, expected):
        assert get_log_level_for_env(environment) == expected

"""Tests for SimulationConfig and logging setup."""

import argparse
import logging

import pytest

from lifegrid.config import SimulationConfig
from lifegrid.core.errors import ValidationError
from lifegrid.logging_config import setup_logging


class TestSimulationConfig:
    """Test cases for configuration validation."""

    def test_valid_seed_file(self):
        SimulationConfig(generations=3, seed_path="seed.txt").validate()

    def test_valid_random(self):
        SimulationConfig(generations=3, randomize=True, rows=4, cols=5, rng_seed=1).validate()

    def test_valid_pattern(self):
        SimulationConfig(generations=1, pattern="Glider", rows=8, cols=8, strategy="cells").validate()

    @pytest.mark.parametrize("generations", [0, -1, None])
    def test_generation_count(self, generations):
        with pytest.raises(ValidationError, match="Generation count"):
            SimulationConfig(generations=generations, seed_path="seed.txt").validate()

    def test_missing_source(self):
        with pytest.raises(ValidationError, match="required"):
            SimulationConfig(generations=1, rows=3, cols=3).validate()

    def test_conflicting_sources(self):
        with pytest.raises(ValidationError, match="only one"):
            SimulationConfig(generations=1, seed_path="seed.txt", randomize=True).validate()

    def test_random_needs_dimensions(self):
        with pytest.raises(ValidationError, match="--rows and --cols"):
            SimulationConfig(generations=1, randomize=True, rows=3).validate()

    def test_reports_every_problem(self):
        """Test all problems are listed in one error."""
        config = SimulationConfig(generations=0, randomize=True, rows=-1, cols=0, workers=0, timeout=-5)
        with pytest.raises(ValidationError) as excinfo:
            config.validate()

        message = str(excinfo.value)
        for fragment in ["Generation count", "Rows", "Cols", "Workers", "Timeout"]:
            assert fragment in message

    def test_unknown_strategy(self):
        with pytest.raises(ValidationError, match="Strategy"):
            SimulationConfig(generations=1, seed_path="s.txt", strategy="magic").validate()

    def test_from_args(self):
        """Test building a config from an argparse namespace."""
        args = argparse.Namespace(
            generations=4, seed_path=None, randomize=True, rows=3, cols=6, verbose=True, workers=2
        )
        config = SimulationConfig.from_args(args)

        assert config.generations == 4
        assert config.randomize is True
        assert config.rows == 3
        assert config.cols == 6
        assert config.workers == 2
        assert config.strategy == "rows"


class TestLogging:
    """Test cases for setup_logging."""

    def test_configures_package_logger(self):
        logger = setup_logging(logging.DEBUG)
        assert logger.name == "lifegrid"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_repeat_calls_do_not_duplicate_handlers(self):
        setup_logging(logging.INFO)
        logger = setup_logging(logging.WARNING)
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "run.log"
        logger = setup_logging(logging.INFO, str(log_file))
        logging.getLogger("lifegrid.core.engine").info("hello from the engine")
        for handler in logger.handlers:
            handler.flush()

        assert len(logger.handlers) == 2
        assert "hello from the engine" in log_file.read_text()

    def test_unopenable_log_file_keeps_existing_handlers(self, tmp_path):
        logger = setup_logging(logging.INFO)
        with pytest.raises(OSError):
            setup_logging(logging.DEBUG, str(tmp_path / "nope" / "run.log"))

        assert len(logger.handlers) == 1
        assert logger.level == logging.INFO

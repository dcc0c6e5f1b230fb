"""Tests for the render-then-advance loop."""

import io
from unittest.mock import patch

import pytest

from lifegrid.core.engine import EngineState, GridEngine
from lifegrid.core.errors import ConcurrencyFailure, ValidationError
from lifegrid.core.runner import run_generations

BLINKER = [
    [0, 0, 0],
    [1, 1, 1],
    [0, 0, 0],
]

HORIZONTAL_RENDER = "[0, 0, 0]\n[1, 1, 1]\n[0, 0, 0]\n\n"
VERTICAL_RENDER = "[0, 1, 0]\n[0, 1, 0]\n[0, 1, 0]\n\n"


class TestRunGenerations:
    """Test cases for run_generations."""

    def test_renders_before_each_advance(self):
        """Test N renders and N advances; the last advanced state isn't printed."""
        out = io.StringIO()
        with GridEngine(3, 3, BLINKER) as engine:
            completed = run_generations(engine, 3, out)

            assert completed == 3
            assert engine.generation == 3
            assert out.getvalue() == HORIZONTAL_RENDER + VERTICAL_RENDER + HORIZONTAL_RENDER
            # Generation 3 is vertical but was never rendered
            assert engine.render() + "\n\n" == VERTICAL_RENDER

    def test_single_generation(self):
        out = io.StringIO()
        engine = GridEngine(3, 3, BLINKER, strategy="sequential")
        run_generations(engine, 1, out)
        assert out.getvalue() == HORIZONTAL_RENDER
        assert engine.generation == 1

    def test_defaults_to_stdout(self, capsys):
        engine = GridEngine(3, 3, BLINKER, strategy="sequential")
        run_generations(engine, 1)
        assert capsys.readouterr().out == HORIZONTAL_RENDER

    @pytest.mark.parametrize("generations", [0, -2, 1.5, True, None])
    def test_invalid_generation_count(self, generations):
        """Test bad counts are rejected before anything is rendered."""
        out = io.StringIO()
        engine = GridEngine(3, 3, BLINKER, strategy="sequential")
        with pytest.raises(ValidationError):
            run_generations(engine, generations, out)
        assert out.getvalue() == ""
        assert engine.generation == 0

    def test_failed_advance_stops_rendering(self):
        """Test nothing is rendered after a failed advance."""
        out = io.StringIO()
        engine = GridEngine(3, 3, BLINKER, strategy="sequential")
        original = GridEngine._evaluate_row
        calls = {"count": 0}

        def fail_in_second_generation(self, row):
            calls["count"] += 1
            if calls["count"] > 3:
                raise RuntimeError("worker lost")
            original(self, row)

        with patch.object(GridEngine, "_evaluate_row", fail_in_second_generation):
            with pytest.raises(ConcurrencyFailure):
                run_generations(engine, 5, out)

        assert out.getvalue() == HORIZONTAL_RENDER + VERTICAL_RENDER
        assert engine.state is EngineState.FAILED

# -*- coding: utf-8 -*-
"""Tests for the loop correctors."""

import pytest

from loop_closure_lib.geometry import Vector3D
from loop_closure_lib.loop import BowditchCorrector
from loop_closure_lib.loop import DeviationCorrector
from loop_closure_lib.loop import LoopCorrector
from loop_closure_lib.loop import NoopCorrector
from loop_closure_lib.loop.closure import calculate_closure_error
from loop_closure_lib.models import Cycle

SQUARE_PATH = ["A", "B", "C", "D", "A"]


def _shot_state(network):
    return [shot.model_dump() for shot in network.shots]


class TestLoopCorrector:
    """Tests for the abstract base class."""

    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            LoopCorrector()

    def test_default_name(self):
        class PlainCorrector(LoopCorrector):
            def correct(self, path, stations):
                return False

        assert PlainCorrector().name == "PlainCorrector"

    def test_correct_cycle_closes_path(self, square_network):
        class RecordingCorrector(LoopCorrector):
            def __init__(self):
                self.paths = []

            def correct(self, path, stations):
                self.paths.append(list(path))
                return False

        corrector = RecordingCorrector()
        corrector.correct_cycle(
            Cycle(id="c1", path=["A", "B", "C", "D"]), square_network.stations,
        )
        assert corrector.paths == [SQUARE_PATH]


class TestNoopCorrector:
    """Tests for NoopCorrector."""

    def test_name(self):
        assert NoopCorrector().name == "NoopCorrector"

    def test_leaves_shots(self, perturbed_square_network):
        before = _shot_state(perturbed_square_network)
        assert NoopCorrector().correct(
            SQUARE_PATH, perturbed_square_network.stations,
        ) is False
        assert _shot_state(perturbed_square_network) == before


class TestBowditchCorrector:
    """Tests for BowditchCorrector."""

    def test_name(self):
        assert BowditchCorrector().name == "BowditchCorrector"

    def test_closes_loop(self, perturbed_square_network):
        stations = perturbed_square_network.stations
        assert BowditchCorrector().correct(SQUARE_PATH, stations) is True
        assert calculate_closure_error(SQUARE_PATH, stations).distance < 1e-9

    def test_closed_loop_unchanged(self, square_network):
        before = _shot_state(square_network)
        assert BowditchCorrector().correct(SQUARE_PATH, square_network.stations) is False
        assert _shot_state(square_network) == before

    def test_large_epsilon(self, perturbed_square_network):
        corrector = BowditchCorrector(epsilon=1.0)
        assert corrector.correct(SQUARE_PATH, perturbed_square_network.stations) is False

    def test_second_pass_is_noop(self, perturbed_square_network):
        stations = perturbed_square_network.stations
        corrector = BowditchCorrector()
        corrector.correct(SQUARE_PATH, stations)
        assert corrector.correct(SQUARE_PATH, stations) is False

    def test_correct_cycles_counts_changed(self, perturbed_square_network):
        """The second cycle walks the same loop, already closed."""
        cycles = [
            Cycle(id="c1", path=["A", "B", "C", "D"], distance=40.0),
            Cycle(id="c2", path=["D", "C", "B", "A"], distance=40.0),
        ]
        count = BowditchCorrector().correct_cycles(
            cycles, perturbed_square_network.stations,
        )
        assert count == 1

    def test_logs_residual(self, perturbed_square_network, caplog):
        with caplog.at_level("INFO", logger="loop_closure_lib"):
            BowditchCorrector().correct(
                SQUARE_PATH, perturbed_square_network.stations,
            )
        assert "closure" in caplog.text


class TestDeviationCorrector:
    """Tests for DeviationCorrector."""

    def _network(self, network_builder):
        return network_builder(
            [
                ("A", "B", 10.0, 0.0, 0.0),
                ("B", "C", 10.0, 90.0, 0.0),
                ("C", "D", 10.0, 180.0, 0.0),
                ("D", "A", 10.0, 270.0, 0.0),
            ],
            positions={
                "A": Vector3D(0.0, 0.0, 0.0),
                "B": Vector3D(0.0, 10.0, 0.0),
                "C": Vector3D(10.5, 10.0, 0.0),
                "D": Vector3D(10.0, 0.0, 0.0),
            },
        )

    def test_name(self):
        assert DeviationCorrector().name == "DeviationCorrector"

    def test_adjusts_then_settles(self, network_builder):
        network = self._network(network_builder)
        corrector = DeviationCorrector()

        assert corrector.correct(SQUARE_PATH, network.stations) is True
        assert network.shots[1].length == pytest.approx(10.5)
        assert corrector.correct(SQUARE_PATH, network.stations) is False

    def test_consistent_network(self, square_network):
        assert DeviationCorrector().correct(
            SQUARE_PATH, square_network.stations,
        ) is False

    def test_threshold(self, network_builder):
        network = self._network(network_builder)
        before = _shot_state(network)
        corrector = DeviationCorrector(threshold=1.0)

        assert corrector.correct(SQUARE_PATH, network.stations) is False
        assert _shot_state(network) == before

    def test_correct_cycle(self, network_builder):
        network = self._network(network_builder)
        cycle = Cycle(id="c1", path=["A", "B", "C", "D"], distance=40.0)
        assert DeviationCorrector().correct_cycle(cycle, network.stations) is True

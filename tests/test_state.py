"""Tests for game.state, game.outcome and game.session."""
from __future__ import annotations

import pytest

from cards.models import Card, Effects
from game.outcome import TERMINAL_CONDITIONS, TerminalStatus, check_terminal
from game.session import GameSession
from game.state import STAT_IDS, ResourceState, scale_delta


def _state(**overrides: int) -> ResourceState:
    return ResourceState(**{"motivation": 40, "performance": 40, "colleagues": 40, "boss": 40, "day": 1, **overrides})


class TestApplyEffect:
    def test_scaling_halves_most_stats(self) -> None:
        state = _state()
        state.apply_effect(Effects(motivation=10, performance=-10, boss=7))
        assert state.motivation == 45
        assert state.performance == 35
        assert state.boss == 43  # 3.5 truncates to 3

    def test_colleagues_scaled_by_35_percent(self) -> None:
        state = _state()
        state.apply_effect(Effects(colleagues=20))
        assert state.colleagues == 47

    def test_negative_deltas_truncate_toward_zero(self) -> None:
        assert scale_delta("colleagues", -5) == -1
        assert scale_delta("boss", -7) == -3

    def test_colleagues_scaling_is_exact_for_round_numbers(self) -> None:
        assert scale_delta("colleagues", 60) == 21

    def test_clamps_to_floor_and_ceiling(self) -> None:
        state = _state(performance=95)
        state.apply_effect(Effects(motivation=-200, performance=200))
        assert state.motivation == 0
        assert state.performance == 100

    def test_day_advances_once_even_without_deltas(self) -> None:
        state = _state(day=7)
        state.apply_effect(Effects())
        assert state.day == 8

    def test_returns_actual_changes(self) -> None:
        state = _state(boss=98)
        changes = state.apply_effect(Effects(boss=20, colleagues=1))
        assert changes == {"boss": 2}

    def test_stats_stay_in_range_for_extreme_sequences(self) -> None:
        state = _state()
        for delta in (300, -300, 150, -75, 1000, -1000, 33, -33):
            state.apply_effect(
                Effects(motivation=delta, performance=-delta, colleagues=delta, boss=-delta)
            )
            for stat_id in STAT_IDS:
                assert 0 <= getattr(state, stat_id) <= 100


class TestBaselines:
    def test_initial_values(self) -> None:
        assert ResourceState.initial().snapshot() == {
            "motivation": 40, "performance": 40, "colleagues": 40, "boss": 40, "day": 1,
        }

    def test_restart_baseline(self) -> None:
        assert ResourceState.restart_baseline().snapshot() == {
            "motivation": 50, "performance": 50, "colleagues": 50, "boss": 50, "day": 1,
        }

    def test_value_of_unknown_is_none(self) -> None:
        assert _state().value_of("salary") is None
        assert _state(day=3).value_of("day") == 3


class TestCheckTerminal:
    def test_running_when_all_stats_inside(self) -> None:
        assert check_terminal(_state()) == TerminalStatus()

    @pytest.mark.parametrize("condition", TERMINAL_CONDITIONS, ids=lambda c: c.cause)
    def test_each_boundary_has_its_own_reason(self, condition) -> None:
        state = _state(**{condition.stat: 100 if condition.at_ceiling else 0})
        status = check_terminal(state)
        assert status.is_over
        assert status.cause == condition.cause
        assert status.reason == condition.reason

    def test_reasons_are_distinct(self) -> None:
        reasons = {c.reason for c in TERMINAL_CONDITIONS}
        assert len(reasons) == 8

    def test_priority_order_when_several_boundaries_hit(self) -> None:
        status = check_terminal(_state(boss=100, colleagues=0, performance=100))
        assert status.cause == "performance_high"

        status = check_terminal(_state(motivation=100, performance=0))
        assert status.cause == "motivation_high"

    def test_boss_ceiling_is_a_victory(self) -> None:
        assert check_terminal(_state(boss=100)).is_victory
        assert not check_terminal(_state(boss=0)).is_victory


class TestSessionApplyEffect:
    def _session(self) -> GameSession:
        return GameSession([Card(id="A")])

    def test_motivation_floor_scenario(self) -> None:
        session = self._session()
        status = session.apply_effect(Effects(motivation=-100))
        assert session.resources.motivation == 0
        assert session.resources.day == 2
        assert status.is_over
        assert status.cause == "motivation_low"

    def test_finished_session_ignores_further_effects(self) -> None:
        session = self._session()
        first = session.apply_effect(Effects(motivation=-100))
        second = session.apply_effect(Effects(boss=200, motivation=100))
        assert second == first
        assert session.resources.day == 2
        assert session.resources.boss == 40

    def test_end_keeps_the_first_status(self) -> None:
        session = self._session()
        session.apply_effect(Effects(boss=-100))
        session.end(TerminalStatus(is_over=True, reason="other", cause="other"))
        assert session.status.cause == "boss_low"

    def test_record_played_skips_empty_ids(self) -> None:
        session = self._session()
        session.record_played(Card(id="X"))
        session.record_played(Card(id=""))
        assert session.played_card_ids == ["X"]

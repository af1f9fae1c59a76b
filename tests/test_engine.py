"""Tests for the pure timer engine.

Covers: duration lookup and fallback, initial state, mode switching,
per-second ticking, focus/break cycling with the long break on every 4th
pomodoro, running-flag helpers, progress and time formatting.
"""

from dataclasses import FrozenInstanceError

import pytest

from pomotasks.tasks.manager import add_task
from pomotasks.timer.engine import (
    Mode, PomodoroState, DURATIONS, POMODOROS_PER_LONG_BREAK,
    get_duration_for_mode, create_pomodoro_state, switch_mode, tick_timer,
    start_timer, pause_timer, toggle_timer, reset_timer, progress, format_time,
)

from helpers import run_period


# ═══════════════════════════════════════════════════════════════════════════
#  DURATIONS
# ═══════════════════════════════════════════════════════════════════════════


class TestDurations:

    @pytest.mark.parametrize("mode, seconds", [
        ("focus", 1500),
        ("short-break", 300),
        ("long-break", 900),
    ])
    def test_known_modes(self, mode, seconds):
        assert get_duration_for_mode(mode) == seconds

    def test_accepts_enum_members(self):
        assert get_duration_for_mode(Mode.LONG_BREAK) == DURATIONS[Mode.LONG_BREAK]

    @pytest.mark.parametrize("mode", ["nap", "", "FOCUS", None, 42])
    def test_unknown_mode_falls_back_to_focus(self, mode):
        assert get_duration_for_mode(mode) == 1500

    def test_mode_is_string_compatible(self):
        assert Mode.SHORT_BREAK == "short-break"


# ═══════════════════════════════════════════════════════════════════════════
#  INITIAL STATE
# ═══════════════════════════════════════════════════════════════════════════


class TestCreateState:

    def test_defaults(self):
        s = create_pomodoro_state()
        assert s.mode == Mode.FOCUS
        assert s.remaining_seconds == 1500
        assert s.completed_pomodoros == 0
        assert s.is_running is False
        assert s.tasks == ()

    def test_states_are_independent(self):
        a = create_pomodoro_state()
        b = create_pomodoro_state()
        assert a == b
        assert add_task(a, "x").tasks != b.tasks

    def test_state_is_immutable(self, state):
        with pytest.raises(FrozenInstanceError):
            state.remaining_seconds = 10


# ═══════════════════════════════════════════════════════════════════════════
#  SWITCH MODE
# ═══════════════════════════════════════════════════════════════════════════


class TestSwitchMode:

    @pytest.mark.parametrize("prior_mode", list(Mode))
    @pytest.mark.parametrize("running", [True, False])
    def test_short_break_always_resets(self, prior_mode, running):
        s = PomodoroState(mode=prior_mode, remaining_seconds=17, is_running=running)
        out = switch_mode(s, "short-break")
        assert out.mode == Mode.SHORT_BREAK
        assert out.remaining_seconds == 300
        assert out.is_running is False

    def test_carries_counter_and_tasks(self, state):
        s = add_task(state, "Write report")
        s = PomodoroState(
            mode=s.mode, remaining_seconds=s.remaining_seconds,
            completed_pomodoros=3, is_running=True, tasks=s.tasks,
        )
        out = switch_mode(s, Mode.LONG_BREAK)
        assert out.completed_pomodoros == 3
        assert out.tasks is s.tasks
        assert out.remaining_seconds == 900

    def test_input_state_untouched(self, state):
        switch_mode(state, Mode.LONG_BREAK)
        assert state.mode == Mode.FOCUS
        assert state.remaining_seconds == 1500

    def test_unknown_mode_kept_with_focus_duration(self, state):
        out = switch_mode(state, "nap")
        assert out.mode == "nap"
        assert out.remaining_seconds == 1500


# ═══════════════════════════════════════════════════════════════════════════
#  TICK
# ═══════════════════════════════════════════════════════════════════════════


class TestTick:

    def test_decrements_one_second(self, state):
        result = tick_timer(state)
        assert result.completed_cycle is False
        assert result.next_state.remaining_seconds == 1499
        assert result.next_state.mode == Mode.FOCUS

    def test_other_fields_unchanged_mid_period(self, state):
        s = start_timer(add_task(state, "a"))
        nxt = tick_timer(s).next_state
        assert nxt.is_running is True
        assert nxt.tasks is s.tasks
        assert nxt.completed_pomodoros == 0

    def test_full_focus_period(self, state):
        s = state
        for i in range(1, 1501):
            result = tick_timer(s)
            s = result.next_state
            if i < 1500:
                assert result.completed_cycle is False
        assert result.completed_cycle is True
        assert s.mode == Mode.SHORT_BREAK
        assert s.remaining_seconds == 300
        assert s.completed_pomodoros == 1
        assert s.is_running is False

    def test_break_returns_to_focus_without_counting(self):
        s = PomodoroState(mode=Mode.SHORT_BREAK, remaining_seconds=1,
                          completed_pomodoros=2, is_running=True)
        result = tick_timer(s)
        assert result.completed_cycle is True
        assert result.next_state.mode == Mode.FOCUS
        assert result.next_state.remaining_seconds == 1500
        assert result.next_state.completed_pomodoros == 2
        assert result.next_state.is_running is False

    def test_zero_remaining_completes(self):
        s = PomodoroState(mode=Mode.FOCUS, remaining_seconds=0)
        assert tick_timer(s).completed_cycle is True

    def test_unknown_mode_completes_into_focus(self):
        s = PomodoroState(mode="nap", remaining_seconds=1, completed_pomodoros=1)
        nxt = tick_timer(s).next_state
        assert nxt.mode == Mode.FOCUS
        assert nxt.completed_pomodoros == 1

    def test_tasks_survive_completion(self, state):
        s = add_task(state, "keep me")
        s = PomodoroState(mode=s.mode, remaining_seconds=1, tasks=s.tasks)
        assert tick_timer(s).next_state.tasks == s.tasks


# ═══════════════════════════════════════════════════════════════════════════
#  CYCLE
# ═══════════════════════════════════════════════════════════════════════════


class TestCycle:

    def test_fourth_break_is_long(self, state):
        s = state
        breaks = []
        for _ in range(POMODOROS_PER_LONG_BREAK):
            result, ticks = run_period(s)           # focus
            assert ticks == 1500
            breaks.append(result.next_state.mode)
            result, _ = run_period(result.next_state)  # break
            s = result.next_state
        assert breaks == [Mode.SHORT_BREAK] * 3 + [Mode.LONG_BREAK]
        assert s.mode == Mode.FOCUS
        assert s.completed_pomodoros == 4

    def test_long_break_lasts_900_ticks(self):
        s = PomodoroState(mode=Mode.LONG_BREAK, remaining_seconds=900)
        _, ticks = run_period(s)
        assert ticks == 900

    def test_eighth_pomodoro_also_long(self):
        s = PomodoroState(mode=Mode.FOCUS, remaining_seconds=1, completed_pomodoros=7)
        assert tick_timer(s).next_state.mode == Mode.LONG_BREAK

    def test_counter_never_decreases(self, state):
        s = state
        last = 0
        for _ in range(10):
            result, _ = run_period(s)
            s = result.next_state
            assert s.completed_pomodoros >= last
            last = s.completed_pomodoros

    def test_remaining_stays_in_range(self, state):
        s = state
        for _ in range(2000):
            s = tick_timer(s).next_state
            assert 0 <= s.remaining_seconds <= get_duration_for_mode(s.mode)


# ═══════════════════════════════════════════════════════════════════════════
#  RUNNING FLAG / RESET
# ═══════════════════════════════════════════════════════════════════════════


class TestRunningFlag:

    def test_start_and_pause(self, state):
        assert start_timer(state).is_running is True
        assert pause_timer(start_timer(state)).is_running is False

    def test_toggle(self, state):
        assert toggle_timer(state).is_running is True
        assert toggle_timer(toggle_timer(state)).is_running is False

    def test_reset_rewinds_current_mode(self, state):
        s = start_timer(switch_mode(state, Mode.SHORT_BREAK))
        for _ in range(42):
            s = tick_timer(s).next_state
        out = reset_timer(s)
        assert out.mode == Mode.SHORT_BREAK
        assert out.remaining_seconds == 300
        assert out.is_running is False

    def test_tick_ignores_running_flag(self, state):
        assert state.is_running is False
        assert tick_timer(state).next_state.remaining_seconds == 1499


# ═══════════════════════════════════════════════════════════════════════════
#  DISPLAY
# ═══════════════════════════════════════════════════════════════════════════


class TestProgress:

    def test_starts_at_zero(self, state):
        assert progress(state) == pytest.approx(0.0)

    def test_halfway(self):
        s = PomodoroState(mode=Mode.SHORT_BREAK, remaining_seconds=150)
        assert progress(s) == pytest.approx(0.5)

    def test_done(self):
        assert progress(PomodoroState(remaining_seconds=0)) == pytest.approx(1.0)


class TestFormatTime:

    @pytest.mark.parametrize("seconds, text", [
        (65, "01:05"),
        (0, "00:00"),
        (3600, "60:00"),
        (3661, "61:01"),
        (1500, "25:00"),
        (59, "00:59"),
        (6000, "100:00"),
    ])
    def test_format(self, seconds, text):
        assert format_time(seconds) == text

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            format_time(-1)

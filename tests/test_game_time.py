from itertools import chain, repeat

import pytest

from chromic.game_time import GameTime


def make_clock(*ticks):
    values = chain(ticks, repeat(ticks[-1]))
    return lambda: next(values)


def test_current_time_starts_at_zero():
    game_time = GameTime(make_clock(100))
    assert game_time.current_time == 0


def test_reset_reads_clock():
    game_time = GameTime(make_clock(100, 250))
    game_time.reset()
    assert game_time.current_time == 250


def test_delta_time_between_resets():
    game_time = GameTime(make_clock(0, 1000, 1500))
    game_time.reset()
    game_time.reset()
    assert game_time.current_time == 1500
    assert game_time.delta_time == pytest.approx(0.5)


def test_delta_time_zero_when_clock_stands_still():
    game_time = GameTime(make_clock(0, 700, 700))
    game_time.reset()
    game_time.reset()
    assert game_time.delta_time == 0.0


def test_delta_time_wraps_instead_of_going_negative():
    game_time = GameTime(make_clock(100))
    # Before the first reset the previous tick is ahead of the current one.
    assert game_time.delta_time > 0


def test_default_clock_is_monotonic():
    game_time = GameTime()
    game_time.reset()
    first = game_time.current_time
    game_time.reset()
    assert game_time.current_time >= first
    assert game_time.delta_time >= 0.0
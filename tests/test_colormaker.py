import datetime
import random
import re
import threading

import pytest

from daylab.colormaker import Color, ColorMaker, GenerateAlgorithm, TIME_FORMAT, time_color


def test_initial_color_is_black_and_algorithm_random_rgb():
    maker = ColorMaker()
    assert maker.color == Color(0, 0, 0)
    assert maker.algorithm is GenerateAlgorithm.RANDOM_RGB


def test_color_rejects_out_of_range_channels():
    with pytest.raises(ValueError):
        Color(256, 0, 0)
    with pytest.raises(ValueError):
        Color(0, -1, 0)


def test_set_color_reports_change():
    seen = []
    maker = ColorMaker(on_color_changed=seen.append)
    maker.set_color(Color(1, 2, 3))
    assert maker.color == Color(1, 2, 3)
    assert seen == [Color(1, 2, 3)]


def test_time_color_from_given_time():
    assert time_color(datetime.time(10, 20, 30)) == Color(10, 40, 120)


def test_time_color_accepts_datetime_with_same_result():
    moment = datetime.datetime(2024, 1, 2, 5, 6, 7)
    assert time_color(moment) == time_color(moment.time())


def test_set_algorithm_accepts_int():
    maker = ColorMaker()
    maker.set_algorithm(3)
    assert maker.algorithm is GenerateAlgorithm.RANDOM_BLUE


@pytest.mark.parametrize(
    "algorithm, kept",
    [
        (GenerateAlgorithm.RANDOM_RED, ("green", "blue")),
        (GenerateAlgorithm.RANDOM_GREEN, ("red", "blue")),
        (GenerateAlgorithm.RANDOM_BLUE, ("red", "green")),
    ],
)
def test_single_channel_algorithms_keep_other_channels(algorithm, kept):
    maker = ColorMaker(rng=random.Random(7))
    start = Color(11, 22, 33)
    maker.set_color(start)
    maker.set_algorithm(algorithm)
    for _ in range(5):
        result = maker.step()
        for name in kept:
            assert getattr(result, name) == getattr(start, name)


def test_random_rgb_is_deterministic_for_seed():
    first = ColorMaker(rng=random.Random(42))
    second = ColorMaker(rng=random.Random(42))
    assert [first.step() for _ in range(4)] == [second.step() for _ in range(4)]
    assert first.color == second.color


def test_linear_increase_wraps_modulo_255():
    maker = ColorMaker()
    maker.set_algorithm(GenerateAlgorithm.LINEAR_INCREASE)
    maker.set_color(Color(250, 0, 100))
    assert maker.step() == Color(5, 10, 110)


def test_step_reports_color_and_timestamp():
    colors, times = [], []
    maker = ColorMaker(on_color_changed=colors.append, on_current_time=times.append,
                       rng=random.Random(1))
    result = maker.step()
    assert colors == [result]
    assert len(times) == 1
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}::\d{2}", times[0])
    datetime.datetime.strptime(times[0], TIME_FORMAT)


def test_start_and_stop_timer():
    fired = threading.Event()
    maker = ColorMaker(on_color_changed=lambda color: fired.set(), interval=0.01)
    maker.start()
    try:
        assert maker.running
        maker.start()
        assert maker.running
        assert fired.wait(5)
    finally:
        maker.stop()
    assert not maker.running
    maker.stop()
    assert not maker.running
from colortools.accessibility import find_accessible_color, max_steps, readable_text_color
from colortools.contrast import contrast_ratio, relative_luminance
from colortools.colors import Color, BLACK, WHITE
from colortools.errors import RangeError, UnreachableError
import pytest

GRAY_119 = Color(119, 119, 119)


def test_passing_target_is_returned_unchanged():
    assert find_accessible_color(BLACK, WHITE) is BLACK


def test_darkens_against_light_background():
    result = find_accessible_color(GRAY_119, WHITE)
    assert result == Color(116, 116, 116)
    assert contrast_ratio(result, WHITE) >= 4.5


def test_lightens_against_dark_background():
    target = Color(60, 60, 60)
    result = find_accessible_color(target, BLACK, min_ratio=4.5)
    assert relative_luminance(result) > relative_luminance(target)
    assert contrast_ratio(result, BLACK) >= 4.5


def test_hue_is_preserved(orange_red):
    result = find_accessible_color(orange_red, WHITE, min_ratio=4.5)
    assert contrast_ratio(result, WHITE) >= 4.5
    assert result.red > result.green > result.blue


def test_ties_go_dark():
    gray = Color(128, 128, 128)
    result = find_accessible_color(gray, gray, min_ratio=3.0)
    assert result.red < 128
    assert contrast_ratio(result, gray) >= 3.0


def test_falls_back_to_the_other_direction():
    background = Color(40, 40, 40)
    target = Color(30, 30, 30)
    result = find_accessible_color(target, background, min_ratio=4.5)
    assert result.red > background.red
    assert contrast_ratio(result, background) >= 4.5


def test_unreachable_ratio_reports_best():
    with pytest.raises(UnreachableError) as err:
        find_accessible_color(GRAY_119, GRAY_119, min_ratio=21)
    assert err.value.best_ratio == pytest.approx(contrast_ratio(BLACK, GRAY_119))
    assert err.value.min_ratio == 21


def test_alpha_is_preserved():
    result = find_accessible_color(GRAY_119.with_alpha(0.8), WHITE)
    assert result.alpha == 0.8


@pytest.mark.parametrize("min_ratio", [0.5, 21.5, float("nan")])
def test_min_ratio_out_of_range(min_ratio):
    with pytest.raises(RangeError) as err:
        find_accessible_color(GRAY_119, WHITE, min_ratio=min_ratio)
    assert err.value.field == "min_ratio"


def test_step_must_be_positive():
    with pytest.raises(RangeError):
        find_accessible_color(GRAY_119, WHITE, step=0)


def test_readable_text_color():
    assert readable_text_color(WHITE) == BLACK
    assert readable_text_color(Color(0, 0, 128)) == WHITE
    assert readable_text_color(Color(255, 87, 51)) == BLACK


def test_fine_step_finds_closer_match():
    silver = Color(204, 204, 204)
    assert find_accessible_color(silver, WHITE) == Color(117, 117, 117)

    result = find_accessible_color(silver, WHITE, step=0.1)
    assert result == Color(118, 118, 118)
    assert contrast_ratio(result, WHITE) >= 4.5


def test_fine_step_walks_to_the_bound():
    # only white itself reaches 21:1 against black
    assert find_accessible_color(Color(128, 128, 128), BLACK, min_ratio=21, step=0.1) == WHITE


def test_step_limit_covers_full_range():
    assert max_steps(1.0) * 1.0 > 100
    assert max_steps(0.1) * 0.1 > 100
    assert max_steps(100.0) == 2

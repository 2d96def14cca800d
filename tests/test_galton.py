import random

import pytest

from picolab.framebuffer import Framebuffer
from picolab.galton import (
    BALL,
    COLS,
    MAX_OBJECTS,
    ROWS,
    SQUARE,
    Coord,
    FallingObject,
    GaltonBoard,
    build_coord_matrix,
    draw_ball,
    draw_ball_counter,
    draw_digit,
    draw_hollow_corner_square,
    draw_probability,
    set_pixel_rotated,
)


def lit(fb):
    return sum(bin(b).count("1") for b in fb.to_bytes())


def test_coord_matrix_shape_and_origin():
    matrix = build_coord_matrix()
    assert len(matrix) == ROWS
    assert all(len(row) == COLS for row in matrix)
    assert matrix[0][0] == Coord(2, 3, BALL)


def test_odd_rows_offset_from_row_above():
    matrix = build_coord_matrix()
    for i in range(1, ROWS, 2):
        for above, here in zip(matrix[i - 1], matrix[i]):
            assert here == Coord(above.x + 1, above.y + 1, SQUARE)


def test_set_pixel_rotated_maps_to_physical():
    fb = Framebuffer()
    set_pixel_rotated(fb, 10, 20, True)
    assert fb.get_pixel(fb.width - 1 - 20, 10)
    assert lit(fb) == 1


def test_set_pixel_rotated_ignores_off_panel():
    fb = Framebuffer()
    set_pixel_rotated(fb, 100, 0, True)
    set_pixel_rotated(fb, 0, 200, True)
    assert fb.to_bytes() == bytes(len(fb.to_bytes()))


def test_draw_ball_and_clear():
    fb = Framebuffer()
    draw_ball(fb, 10, 10, 2, True)
    assert lit(fb) == 13
    assert fb.get_pixel(fb.width - 1 - 10, 10)
    draw_ball(fb, 10, 10, 2, False)
    assert lit(fb) == 0


def test_draw_ball_radius_zero_is_single_pixel():
    fb = Framebuffer()
    draw_ball(fb, 5, 5, 0, True)
    assert lit(fb) == 1


def test_hollow_square_leaves_corners():
    fb = Framebuffer()
    draw_hollow_corner_square(fb, 10, 10, True)
    assert lit(fb) == 12
    assert not fb.get_pixel(fb.width - 1 - 10, 10)
    assert fb.get_pixel(fb.width - 1 - 11, 10)
    draw_hollow_corner_square(fb, 10, 10, False)
    assert lit(fb) == 0


def test_draw_digit_overwrites_previous():
    fb = Framebuffer()
    draw_digit(fb, 20, 20, 8)
    draw_digit(fb, 20, 20, 1)
    other = Framebuffer()
    draw_digit(other, 20, 20, 1)
    assert fb.to_bytes() == other.to_bytes()


@pytest.mark.parametrize("digit", [-1, 10])
def test_draw_digit_ignores_invalid(digit):
    fb = Framebuffer()
    draw_digit(fb, 20, 20, digit)
    assert lit(fb) == 0


def test_draw_probability_half():
    fb = Framebuffer()
    draw_probability(fb, 0.5)
    expected = Framebuffer()
    draw_digit(expected, 53, 2, 5)
    draw_digit(expected, 59, 2, 0)
    assert fb.to_bytes() == expected.to_bytes()


@pytest.mark.parametrize("prob,tens,units", [(1.0, 9, 9), (-0.3, 0, 0)])
def test_draw_probability_clamps(prob, tens, units):
    fb = Framebuffer()
    draw_probability(fb, prob)
    expected = Framebuffer()
    draw_digit(expected, 53, 2, tens)
    draw_digit(expected, 59, 2, units)
    assert fb.to_bytes() == expected.to_bytes()


def test_ball_counter_keeps_last_two_digits():
    a = Framebuffer()
    draw_ball_counter(a, 123)
    b = Framebuffer()
    draw_ball_counter(b, 23)
    assert a.to_bytes() == b.to_bytes()


def test_board_starts_with_pyramid():
    board = GaltonBoard(Framebuffer(), random.Random(1))
    assert board.occupied[4][6]
    assert not board.occupied[4][5]
    assert board.launched_count == 0
    assert not board.done


def test_board_rejects_bad_probability():
    with pytest.raises(ValueError):
        GaltonBoard(Framebuffer(), random.Random(1), 1.5)


def test_launch_limit():
    board = GaltonBoard(Framebuffer(), random.Random(1))
    first = board.launch()
    assert (first.i, first.j, first.active, first.released) == (2, 6, True, True)
    for _ in range(MAX_OBJECTS - 1):
        board.launch()
    assert board.launch() is None
    assert board.launched_count == MAX_OBJECTS


def test_right_path_slides_past_peg():
    board = GaltonBoard(Framebuffer(), random.Random(1), 0.0)
    obj = board.launch()
    board.update(True)
    assert (obj.i, obj.j) == (3, 6)
    board.update(False)
    assert (obj.i, obj.j) == (4, 7)


def test_left_path():
    board = GaltonBoard(Framebuffer(), random.Random(1), 1.0)
    obj = board.launch()
    board.update(True)
    assert (obj.i, obj.j) == (3, 5)
    board.update(False)
    assert (obj.i, obj.j) == (4, 5)


def test_fall_stops_at_base_and_stacks():
    board = GaltonBoard(Framebuffer(), random.Random(1))
    board.objects[0] = FallingObject(i=ROWS - 3, j=0, active=True, released=True)
    board.update(True)
    assert board.objects[0].i == ROWS - 1
    board.update(False)
    assert not board.objects[0].active
    assert board.occupied[ROWS - 1][0]
    board.objects[1] = FallingObject(i=ROWS - 5, j=0, active=True, released=True)
    board.update(True)
    board.update(True)
    assert board.objects[1].i == ROWS - 3
    assert not board.objects[1].active


def test_full_run_finishes():
    board = GaltonBoard(Framebuffer(), random.Random(7))
    for _ in range(5000):
        if board.tick():
            break
    assert board.done
    assert board.all_inactive()
    assert board.launched_count == MAX_OBJECTS
    cycles = board.cycle_counter
    assert board.tick()
    assert board.cycle_counter == cycles


def test_reset_matches_fresh_board():
    board = GaltonBoard(Framebuffer(), random.Random(3))
    while not board.tick():
        pass
    board.reset()
    fresh = GaltonBoard(Framebuffer(), random.Random(3))
    draw_ball_counter(fresh.framebuffer, 0)
    assert board.framebuffer.to_bytes() == fresh.framebuffer.to_bytes()
    assert board.launched_count == 0
    assert not any(obj.released for obj in board.objects)
    assert board.step and not board.done


def test_adjust_probability_clamps():
    board = GaltonBoard(Framebuffer(), random.Random(1))
    for _ in range(30):
        value = board.adjust_probability(0.05)
    assert value == 1.0
    for _ in range(30):
        value = board.adjust_probability(-0.05)
    assert value == 0.0
    expected = Framebuffer()
    draw_probability(expected, 0.0)
    assert board.framebuffer.to_bytes()[: 128 * 8] != bytes(128 * 8)
    fb_digits = Framebuffer()
    draw_digit(fb_digits, 53, 2, 0)
    draw_digit(fb_digits, 59, 2, 0)
    assert expected.to_bytes() == fb_digits.to_bytes()
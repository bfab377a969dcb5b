import copy

import pytest

from flappy.constants import SKY_COLOR, PIPE_TOP_COLOR, PIPE_BOTTOM_COLOR, BIRD_COLOR, PIPE_GAP, FIELD_HEIGHT
from flappy.data_models import Pipe
from flappy.renderer import Renderer


def rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def pair(x, top_height=100):
    return [
        Pipe(x=x, y=0, height=top_height),
        Pipe(x=x, y=top_height + PIPE_GAP, height=FIELD_HEIGHT - top_height - PIPE_GAP),
    ]


def test_requires_a_surface():
    with pytest.raises(TypeError):
        Renderer(None)


def test_pipes_coloured_by_position(state, surface):
    state.pipes = pair(0)
    Renderer(surface).draw(state)

    assert rgb(surface, (10, 50)) == PIPE_TOP_COLOR
    assert rgb(surface, (10, 500)) == PIPE_BOTTOM_COLOR
    assert rgb(surface, (10, 200)) == SKY_COLOR


def test_new_frame_replaces_old(state, surface):
    renderer = Renderer(surface)
    state.pipes = pair(0)
    renderer.draw(state)

    state.pipes = []
    renderer.draw(state)
    assert rgb(surface, (10, 50)) == SKY_COLOR
    assert rgb(surface, (10, 500)) == SKY_COLOR


def test_bird_drawn_at_its_position(state, surface):
    state.bird.velocity = 6.0
    Renderer(surface).draw(state)

    bird = state.bird
    assert rgb(surface, (int(bird.x + bird.width / 2), int(bird.y + bird.height / 2))) == BIRD_COLOR
    assert rgb(surface, (int(bird.x + bird.width / 2), int(bird.y - 20))) == SKY_COLOR


def test_draw_leaves_state_untouched(state, surface):
    state.pipes = pair(120)
    state.score = 4
    state.bird.velocity = -3.5
    before = copy.deepcopy((state.bird, state.pipes, state.score, state.game_over))

    renderer = Renderer(surface)
    renderer.draw(state)

    assert (state.bird, state.pipes, state.score, state.game_over) == before
    assert renderer.score_text == "4"


def test_overlay_toggles(state, surface):
    renderer = Renderer(surface)
    renderer.show_start_screen()
    assert renderer.start_visible and not renderer.game_over_visible
    renderer.draw(state)

    renderer.hide_start_screen()
    state.score = 6
    renderer.show_game_over_screen(state.score)
    state.score = 0
    renderer.draw(state)
    assert renderer.game_over_visible
    assert renderer.final_score == 6

    renderer.show_start_screen()
    assert not renderer.game_over_visible

    renderer.hide_game_over_screen()
    renderer.hide_start_screen()
    assert not renderer.start_visible and not renderer.game_over_visible

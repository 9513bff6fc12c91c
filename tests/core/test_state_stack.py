from __future__ import annotations

import pytest

from procsketch.core.color import BLACK, WHITE, rgb
from procsketch.core.errors import StateStackUnderflowError
from procsketch.core.state import DEFAULT_STATE, StateStack, TextAlign, TextStyle


def test_default_state_is_black_fill_white_stroke_both_enabled() -> None:
    stack = StateStack()
    st = stack.current
    assert stack.depth == 1
    assert st.fill_color == BLACK
    assert st.stroke_color == WHITE
    assert st.fill_enabled and st.stroke_enabled
    assert (st.offset_x, st.offset_y) == (0, 0)
    assert st.text_style is TextStyle.NORMAL
    assert st.text_align is TextAlign.CENTER


def test_balanced_push_pop_restores_state() -> None:
    stack = StateStack()
    stack.translate(3, 4)
    before = stack.current

    stack.push()
    stack.set_fill(rgb(1, 2, 3))
    stack.push()
    stack.translate(10, 10)
    stack.no_stroke()
    stack.pop()
    stack.set_text_align(TextAlign.LEFT)
    stack.pop()

    assert stack.current == before
    assert stack.depth == 1


@pytest.mark.parametrize(
    "mutate",
    [
        lambda s: s.set_fill(rgb(9, 9, 9)),
        lambda s: s.set_stroke(rgb(9, 9, 9)),
        lambda s: s.no_fill(),
        lambda s: s.no_stroke(),
        lambda s: s.set_text_align(TextAlign.LEFT),
        lambda s: s.set_text_style(TextStyle.BOLD),
        lambda s: s.translate(5, -5),
    ],
)
def test_mutation_between_push_and_pop_is_isolated(mutate) -> None:
    stack = StateStack()
    before = stack.current
    stack.push()
    mutate(stack)
    assert stack.current != before
    stack.pop()
    assert stack.current == before


def test_push_copies_current_state() -> None:
    stack = StateStack()
    stack.set_fill(rgb(10, 20, 30))
    stack.push()
    assert stack.current.fill_color == rgb(10, 20, 30)
    assert stack.depth == 2


def test_translate_accumulates() -> None:
    a = StateStack()
    a.translate(3, 7)
    a.translate(-1, 5)

    b = StateStack()
    b.translate(2, 12)

    assert (a.current.offset_x, a.current.offset_y) == (2, 12)
    assert a.current == b.current


def test_pop_without_push_raises() -> None:
    stack = StateStack()
    with pytest.raises(StateStackUnderflowError):
        stack.pop()
    # 失敗した pop は既定状態を壊さない
    assert stack.depth == 1
    assert stack.current == DEFAULT_STATE


def test_set_fill_and_stroke_reenable_drawing() -> None:
    stack = StateStack()
    stack.no_fill()
    stack.no_stroke()
    assert not stack.current.draws_fill
    assert not stack.current.draws_stroke

    stack.set_fill(rgb(1, 1, 1))
    stack.set_stroke(rgb(2, 2, 2))
    assert stack.current.draws_fill
    assert stack.current.draws_stroke


def test_reset_drops_saved_states() -> None:
    stack = StateStack()
    stack.push()
    stack.push()
    stack.translate(1, 1)
    stack.reset()
    assert stack.depth == 1
    assert stack.current == DEFAULT_STATE

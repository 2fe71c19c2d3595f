import pytest

from mdglance.actions import Action, ActionKind, HistDirection, VertDirection, Zoom


def test_constructors_match_explicit_form():
    assert Action.scroll(VertDirection.DOWN) == Action(ActionKind.SCROLL, VertDirection.DOWN)
    assert Action.history(HistDirection.PREV) == Action(ActionKind.HISTORY, HistDirection.PREV)
    assert Action.zoom(Zoom.RESET) == Action(ActionKind.ZOOM, Zoom.RESET)
    assert Action.to_edge(VertDirection.UP).kind is ActionKind.TO_EDGE
    assert Action.page(VertDirection.UP).arg is VertDirection.UP


def test_argless_actions():
    assert Action.copy().arg is None
    assert Action.quit() == Action(ActionKind.QUIT)
    assert Action.copy() != Action.quit()


def test_different_directions_differ():
    assert Action.scroll(VertDirection.UP) != Action.scroll(VertDirection.DOWN)
    assert Action.scroll(VertDirection.UP) != Action.page(VertDirection.UP)


@pytest.mark.parametrize(
    "kind, arg",
    [
        (ActionKind.COPY, VertDirection.UP),
        (ActionKind.QUIT, Zoom.IN),
        (ActionKind.SCROLL, None),
        (ActionKind.HISTORY, VertDirection.UP),
        (ActionKind.ZOOM, HistDirection.NEXT),
    ],
)
def test_wrong_argument_rejected(kind, arg):
    with pytest.raises(ValueError):
        Action(kind, arg)


def test_actions_are_hashable():
    actions = {Action.quit(), Action.quit(), Action.scroll(VertDirection.UP)}
    assert len(actions) == 2
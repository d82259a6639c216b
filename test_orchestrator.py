import main
from orchestrator import Orchestrator
from selection import Selection
from selection_state import Mode


def _orchestrator():
    # skip __init__: it needs a live terminal
    orch = Orchestrator.__new__(Orchestrator)
    orch.state = main.build_state(
        {
            "DEFAULT_COL_WIDTH": 4,
            "DEFAULT_ROW_HEIGHT": 1,
            "COL_WIDTHS": None,
            "ROW_HEIGHTS": None,
        }
    )
    return orch


def test_keys_drive_selection():
    orch = _orchestrator()
    for key in "jjlv" + "jl":
        assert orch.handle_key(ord(key)) is True
    assert orch.state.mode is Mode.VISUAL
    assert orch.state.selection == Selection(2, 1, rows=2, cols=2)
    assert orch.handle_key(27) is True
    assert orch.state.mode is Mode.NORMAL
    assert orch.state.selection == Selection(2, 1)


def test_unbound_key_is_ignored():
    orch = _orchestrator()
    assert orch.handle_key(ord("x")) is True
    assert orch.state.selection == Selection()


def test_quit_key_stops_loop():
    orch = _orchestrator()
    assert orch.handle_key(ord("q")) is False


def test_run_redraws_until_quit():
    orch = _orchestrator()
    keys = iter([-1, ord("j"), -1, ord("q")])
    draws = []

    class DummyScr:
        def getch(self):
            return next(keys)

    orch.stdscr = DummyScr()
    orch.redraw = lambda: draws.append(orch.state.selection)
    orch.run()
    assert draws == [Selection(), Selection(), Selection(1, 0), Selection(1, 0)]

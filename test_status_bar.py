from selection import Selection
from selection_state import Mode
from status_bar import render_status


def test_normal_mode_shows_cell_reference():
    text = render_status({"mode": Mode.NORMAL, "selection": Selection(2, 1)}, 20)
    assert text == " NORMAL | B3".ljust(20)


def test_visual_mode_shows_range():
    text = render_status(
        {"mode": Mode.VISUAL, "selection": Selection(1, 1, rows=3, cols=2)}, 30
    )
    assert text.rstrip() == " VISUAL | B2:C4"
    assert len(text) == 30



def test_status_is_truncated_to_width():
    text = render_status({"mode": Mode.VISUAL, "selection": Selection(0, 0, 5, 5)}, 8)
    assert text == " VISUAL "

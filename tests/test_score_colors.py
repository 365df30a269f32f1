import pytest

from horecascan.services.score_colors import get_numeric_score_color, get_score_color


def test_grade_color_triple():
    colors = get_score_color("A+")
    assert colors.bg == "bg-emerald-500/10"
    assert colors.text == "text-emerald-600 dark:text-emerald-400"
    assert colors.border == "border-emerald-500/20"


def test_every_grade_has_its_own_color():
    grades = ["A+", "A", "B+", "B", "C+", "C", "D", "F"]
    assert len({get_score_color(g).bg for g in grades}) == len(grades)
    assert get_score_color("F").bg == "bg-rose-500/10"


def test_unknown_grade_is_muted():
    assert get_score_color("Z").bg == "bg-muted"


@pytest.mark.parametrize(
    "value, token",
    [(100, "bg-emerald-500"), (85, "bg-emerald-500"), (84, "bg-green-500"), (70, "bg-green-500"),
     (55, "bg-yellow-500"), (40, "bg-orange-500"), (39, "bg-red-500"), (0, "bg-red-500")],
)
def test_numeric_color_bands(value, token):
    assert get_numeric_score_color(value) == token

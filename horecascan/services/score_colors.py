# horecascan/services/score_colors.py
# -----------------------------------------------------------------------------
# Presentation helpers: grade / numeric score -> Tailwind color tokens
# -----------------------------------------------------------------------------
from horecascan.schemas.score import ScoreColorScheme


def _scheme(color: str) -> ScoreColorScheme:
    return ScoreColorScheme(
        bg=f"bg-{color}-500/10",
        text=f"text-{color}-600 dark:text-{color}-400",
        border=f"border-{color}-500/20",
    )


GRADE_COLORS = {
    "A+": "emerald",
    "A": "green",
    "B+": "lime",
    "B": "yellow",
    "C+": "amber",
    "C": "orange",
    "D": "red",
    "F": "rose",
}

MUTED = ScoreColorScheme(bg="bg-muted", text="text-muted-foreground", border="border-border")


def get_score_color(grade: str) -> ScoreColorScheme:
    """{bg, text, border} classes for a grade badge. Unknown grades get muted tokens."""
    color = GRADE_COLORS.get(grade)
    return _scheme(color) if color else MUTED


def get_numeric_score_color(score: float) -> str:
    """Background token for progress bars."""
    if score >= 85:
        return "bg-emerald-500"
    if score >= 70:
        return "bg-green-500"
    if score >= 55:
        return "bg-yellow-500"
    if score >= 40:
        return "bg-orange-500"
    return "bg-red-500"

"""Plain-text rendering of a game view."""

from .constants import EMPTY_CELL, FOCUS_MARKER


def player_initial(name: str) -> str:
    return name[:1].upper()


def format_score(value: int | None, focused: bool = False) -> str:
    text = EMPTY_CELL if value is None else str(value)
    return f'{FOCUS_MARKER}{text}' if focused else text


def render_roster(view) -> str:
    """Numbered player list shown before the game starts."""
    if not view.players:
        return '(no players)'
    return '\n'.join(f'{i}. {p.name}' for i, p in enumerate(view.players))


def render_scoresheet(view, width: int = 5) -> str:
    """
    Render the score grid with one column per player.

    Columns are headed by player initials, unfilled cells show ``--`` and
    the focused cell is prefixed with ``*``. A totals row closes the table.
    """
    if not view.started:
        return render_roster(view)

    label_width = max(3, len(str(len(view.rounds))))

    def row(label: str, cells: list[str]) -> str:
        return label.rjust(label_width) + ''.join(c.rjust(width) for c in cells)

    lines = [row('', [player_initial(p.name) for p in view.players])]
    for r, rnd in enumerate(view.rounds):
        cells = [format_score(value, view.focused == (r, p)) for p, value in enumerate(rnd)]
        lines.append(row(str(r + 1), cells))
    lines.append(row('TOT', [str(t) for t in view.totals]))

    lines.append(f'Playing to {view.target_score}')
    return '\n'.join(lines)

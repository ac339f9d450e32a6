"""Excel scoresheet export."""

import logging
from pathlib import Path

import openpyxl
from openpyxl.styles import Font

logger = logging.getLogger('nertz.excel_export')

NEGATIVE_FONT = Font(color='FFFF0000')
HEADER_FONT = Font(bold=True)


def export_scoresheet(view, path: str | Path, sheet_name: str = 'Scores') -> Path:
    """
    Write the score grid to an Excel workbook.

    Layout: row 1 holds player names from column B, each following row is a
    round labelled in column A, and the last row holds totals. Unfilled
    cells are left blank; negative scores are red.

    Args:
        view: GameView to export
        path: Destination .xlsx file (overwritten)
        sheet_name: Worksheet title

    Returns:
        Path written
    """
    path = Path(path)
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = sheet_name

    ws.cell(row=1, column=1, value='Round').font = HEADER_FONT
    for p, player in enumerate(view.players):
        ws.cell(row=1, column=p + 2, value=player.name).font = HEADER_FONT

    for r, rnd in enumerate(view.rounds):
        row = r + 2
        ws.cell(row=row, column=1, value=r + 1)
        for p, value in enumerate(rnd):
            if value is None:
                continue
            cell = ws.cell(row=row, column=p + 2, value=value)
            if value < 0:
                cell.font = NEGATIVE_FONT

    total_row = len(view.rounds) + 2
    ws.cell(row=total_row, column=1, value='Total').font = HEADER_FONT
    for p, total in enumerate(view.totals):
        cell = ws.cell(row=total_row, column=p + 2, value=total)
        cell.font = Font(bold=True, color='FFFF0000') if total < 0 else HEADER_FONT

    path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(path)
    wb.close()
    logger.info(f'Scoresheet saved to {path}')
    return path

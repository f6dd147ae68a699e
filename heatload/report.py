"""Summary table and CSV export of the load items in a project.

The totals are recomputed from the items each time a table is requested, so
rendering or exporting the same list twice gives identical results.
"""
from pathlib import Path
from typing import Sequence

import pandas as pd

from .config import SETTINGS
from .console import Console
from .exceptions import FileWriteError
from .loads import LoadItem
from .logging import ModuleLogger
from .units import btuhr_to_kw, btuhr_to_ton

logger = ModuleLogger.get_logger(__name__)

COLUMNS = ['#', 'Name', 'Method', 'BTU/hr', 'kW', 'Tons']
CSV_HEADER = 'Index,Name,Method,BTU_per_hr,kW,Tons'


def get_summary_table(items: Sequence[LoadItem]) -> pd.DataFrame:
    """Returns a Pandas DataFrame with one row per load item. Column '#' holds
    the 1-based position of the item in `items`; the heat rate of the item is
    listed in BTU/hr, kW and refrigeration tons.
    """
    table = {column: [] for column in COLUMNS}
    for i, item in enumerate(items, start=1):
        table['#'].append(i)
        table['Name'].append(item.name)
        table['Method'].append(str(item.method))
        table['BTU/hr'].append(item.btu_per_hr)
        table['kW'].append(btuhr_to_kw(item.btu_per_hr))
        table['Tons'].append(btuhr_to_ton(item.btu_per_hr))
    return pd.DataFrame(table, columns=COLUMNS)


def get_total(table: pd.DataFrame) -> tuple[float, float, float]:
    """Returns the total heat rate of a summary table in BTU/hr, kW and
    refrigeration tons. kW and tons are derived from the BTU/hr sum.
    """
    total = float(table['BTU/hr'].sum())
    return total, btuhr_to_kw(total), btuhr_to_ton(total)


def render_table(items: Sequence[LoadItem]) -> str:
    """Returns the project load summary as fixed-width text: one line per
    item followed by a line with the totals. Names and method tags that
    don't fit in their column are truncated.
    """
    w_name = SETTINGS.name_width
    w_method = SETTINGS.method_width
    rule = '-' * 82
    table = get_summary_table(items)
    lines = [
        '',
        '------------------ PROJECT LOAD SUMMARY ------------------',
        f"{'#':<4}{'Name':<{w_name}}{'Method':<{w_method}}"
        f"{'BTU/hr':>14}{'kW':>12}{'Tons':>10}",
        rule
    ]
    for i, name, method, btu, kw, tons in table.itertuples(index=False, name=None):
        lines.append(
            f"{f'{i})':<4}{name[:w_name - 1]:<{w_name}}"
            f"{method[:w_method - 1]:<{w_method}}"
            f"{btu:>14.1f}{kw:>12.3f}{tons:>10.3f}"
        )
    total, total_kw, total_tons = get_total(table)
    lines.append(rule)
    lines.append(
        f"{'TOTAL:':>{4 + w_name + w_method}}"
        f"{total:>14.1f}{total_kw:>12.3f}{total_tons:>10.3f}"
    )
    lines.append('-' * 58)
    return '\n'.join(lines) + '\n\n'


def print_item_table(items: Sequence[LoadItem], console: Console) -> None:
    console.write(render_table(items))


def _quote(text: str) -> str:
    return '"' + text.replace('"', '""') + '"'


def export_csv(items: Sequence[LoadItem], path: Path | str) -> Path:
    """Writes the load items and their total to a CSV file at `path`.

    Text fields are double-quoted. BTU/hr values are written with 1 decimal,
    kW and ton values with 3 decimals. The last row holds the totals, with an
    empty index and method and the name "TOTAL".

    Raises
    ------
    FileWriteError
        If the file cannot be opened or written.
    """
    path = Path(path)
    table = get_summary_table(items)
    lines = [CSV_HEADER]
    for i, name, method, btu, kw, tons in table.itertuples(index=False, name=None):
        lines.append(f"{i},{_quote(name)},{_quote(method)},{btu:.1f},{kw:.3f},{tons:.3f}")
    total, total_kw, total_tons = get_total(table)
    lines.append(f",{_quote('TOTAL')},{_quote('')},{total:.1f},{total_kw:.3f},{total_tons:.3f}")
    try:
        with open(path, 'w', encoding='utf-8', newline='') as fh:
            fh.writelines(line + '\n' for line in lines)
    except OSError as err:
        raise FileWriteError(path) from err
    logger.info(f"exported {len(items)} load item(s) to {path}")
    return path

"""
Report Formatting Utilities

Provides consistent console formatting for:
- Profit test summaries
- Per-tick trade tables
"""

from typing import Iterable, List, Sequence

SUMMARY_RULE = "=" * 30
TABLE_RULE = "-" * 38

# (header, width) pairs for the trade table
TRADE_COLUMNS = (("T", 8), ("SIDE", 8), ("PRICE", 12), ("PNL", 12))


class NumberFormatter:
    """General number formatting utilities."""

    @staticmethod
    def format_fixed(value: float, precision: int = 4) -> str:
        """Fixed-point decimal rendering."""
        return f"{value:.{precision}f}"

    @staticmethod
    def format_pnl(pnl: float, precision: int = 4) -> str:
        """Signed P&L rendering."""
        sign = "+" if pnl > 0 else ""
        return f"{sign}{pnl:.{precision}f}"


class TableFormatter:
    """Formats rows as fixed-width, left-aligned columns."""

    @staticmethod
    def format_row(cells: Sequence[str], widths: Sequence[int]) -> str:
        return "".join(str(cell).ljust(width) for cell, width in zip(cells, widths)).rstrip()

    @staticmethod
    def format_table(headers: Sequence[str], widths: Sequence[int], rows: Iterable[Sequence[str]]) -> str:
        """
        Format data as a fixed-width table with a rule under the header.

        Args:
            headers: Column headers
            widths: Column widths (cells are padded, never truncated)
            rows: Row cell values

        Returns:
            Formatted table string
        """
        lines = [TableFormatter.format_row(headers, widths), TABLE_RULE]
        for row in rows:
            lines.append(TableFormatter.format_row(row, widths))
        return "\n".join(lines)


def format_trade_table(rows) -> str:
    """
    Render trade rows as the T / SIDE / PRICE / PNL table.

    Args:
        rows: Iterable of objects with timestamp, side, price and pnl
    """
    headers = [name for name, _ in TRADE_COLUMNS]
    widths = [width for _, width in TRADE_COLUMNS]
    cells = (
        [
            str(row.timestamp),
            getattr(row.side, 'value', str(row.side)),
            NumberFormatter.format_fixed(row.price),
            NumberFormatter.format_fixed(row.pnl),
        ]
        for row in rows
    )
    return TableFormatter.format_table(headers, widths, cells)


def format_summary(result) -> str:
    """Render the header block for one profit test result."""
    lines: List[str] = [
        SUMMARY_RULE,
        f"Test Name   : {result.name}",
        f"Result      : {'PASS' if result.passed else 'FAIL'}",
        f"Final PnL   : {NumberFormatter.format_pnl(result.final_pnl)}",
        f"Num trades  : {result.num_trades}",
        f"Max DD      : {NumberFormatter.format_fixed(result.max_drawdown)}",
        f"Time taken  : {result.micros} us",
        SUMMARY_RULE,
    ]
    return "\n".join(lines)

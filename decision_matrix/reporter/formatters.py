"""Value formatters shared by the comparison and PDF exports."""

from __future__ import annotations

from typing import Optional


def format_currency(value: float) -> str:
    """Format as Brazilian reais, e.g. ``R$ 1.234,56``."""
    formatted = f"{value:,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"R$ {formatted}"


def _fmt_number(value: float) -> str:
    return f"{value:g}"


def format_days(value: float) -> str:
    return f"{_fmt_number(value)} dias"


def format_months(value: float) -> str:
    return f"{_fmt_number(value)} meses"


def format_shipping(value: float) -> str:
    """Freight cost, or ``Grátis`` when free."""
    return format_currency(value) if value > 0 else "Grátis"


def position_label(position: int) -> str:
    """Ordinal label for a 1-based ranking position, e.g. ``1º``."""
    return f"{position}º"


def format_score(score: float) -> str:
    return f"{score:.1f}"


def quote_code(quote_id: str, local_code: Optional[str] = None) -> str:
    """Display code of a quotation.

    Uses the client's local code when there is one, otherwise the first
    eight characters of the quote id.
    """

    if local_code:
        return f"#{local_code}"
    return f"#{quote_id[:8].upper()}"

"""PDF export of a decision matrix report."""

import logging
from pathlib import Path
from typing import List

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from ..models import DecisionMatrixReport
from .formatters import (
    format_currency,
    format_days,
    format_months,
    format_score,
    format_shipping,
    position_label,
)

logger = logging.getLogger(__name__)

PRIMARY = (0, 51, 102)
ACCENT_GREEN = (34, 197, 94)
LIGHT_GRAY = (245, 245, 245)
DARK_TEXT = (15, 23, 42)
MUTED_TEXT = (100, 100, 100)

WEIGHT_LABELS = (
    ("price", "Preço"),
    ("delivery_time", "Prazo"),
    ("shipping_cost", "Frete"),
    ("warranty", "Garantia"),
    ("sla", "Pontualidade"),
    ("reputation", "Reputação"),
)

RANKING_HEADERS = ["Pos", "Fornecedor", "Score", "Preço Total", "Prazo", "Frete", "Garantia"]
RANKING_WIDTHS = [15, 45, 20, 30, 22, 25, 23]
RANKING_ALIGN = ["C", "L", "C", "R", "C", "R", "C"]

ITEM_HEADERS = ["#", "Produto", "Qtd"]
ITEM_WIDTHS = [15, 145, 20]
ITEM_ALIGN = ["C", "L", "C"]

METHODOLOGY = (
    "Cada proposta é avaliada em 6 dimensões (preço, prazo, frete, garantia, pontualidade, "
    "reputação). Os valores são normalizados em escala 0-100 e multiplicados pelos pesos "
    "configurados. O score final indica a melhor escolha considerando os critérios definidos."
)


def latin1(text) -> str:
    """Core PDF fonts only cover Latin-1; replace anything outside it."""
    return str(text).encode("latin-1", errors="replace").decode("latin-1")


def ranking_rows(report: DecisionMatrixReport) -> List[List[str]]:
    """Rows of the ranking table, best proposal first."""
    rows = []
    for ranked in report.ranked_proposals:
        metrics = ranked.metrics
        warranty = ranked.proposal.warranty_months if ranked.proposal else metrics.warranty
        rows.append([
            position_label(ranked.position),
            ranked.name,
            format_score(ranked.score),
            format_currency(metrics.price),
            format_days(metrics.delivery_time),
            format_shipping(metrics.shipping_cost),
            format_months(warranty),
        ])
    return rows


def item_rows(report: DecisionMatrixReport) -> List[List[str]]:
    return [
        [str(index), item.product_name, f"{item.quantity:g}"]
        for index, item in enumerate(report.quote_items, start=1)
    ]


def pdf_filename(report: DecisionMatrixReport) -> str:
    return f"Matriz_Decisao_{report.quote_code}_{report.generated_at:%Y-%m-%d}.pdf"


class DecisionMatrixPDF(FPDF):
    """Comparative analysis of proposals, laid out on A4 portrait."""

    ROW_HEIGHT = 7

    def __init__(self, report: DecisionMatrixReport):
        super().__init__(orientation="P", unit="mm", format="A4")
        self.report = report
        self.set_margins(15, 15, 15)
        self.set_auto_page_break(auto=True, margin=20)
        self.set_title(latin1(f"Matriz de Decisão - {report.quote_name}"))

    # ------------------------------------------------------------------
    #  Footer
    # ------------------------------------------------------------------
    def footer(self):
        self.set_y(-15)
        self.set_font("Helvetica", "", 8)
        self.set_text_color(128, 128, 128)
        self.cell(0, 5, latin1(
            f"Gerado pelo Cotiz em {self._timestamp()} - Página {self.page_no()} de {{nb}}"
        ), align="C")

    def _timestamp(self) -> str:
        return f"{self.report.generated_at:%d/%m/%Y} às {self.report.generated_at:%H:%M}"

    # ------------------------------------------------------------------
    #  Sections
    # ------------------------------------------------------------------
    def _section_title(self, title: str):
        self.set_font("Helvetica", "B", 12)
        self.set_text_color(*PRIMARY)
        self.cell(0, 8, latin1(title), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    def _header_band(self):
        self.set_fill_color(*PRIMARY)
        self.rect(0, 0, self.w, 35, style="F")

        self.set_text_color(255, 255, 255)
        self.set_xy(self.l_margin, 8)
        self.set_font("Helvetica", "B", 18)
        self.cell(self.epw, 9, latin1("ANÁLISE COMPARATIVA DE PROPOSTAS"), align="C",
                  new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.set_font("Helvetica", "", 10)
        self.cell(self.epw, 6, latin1("Matriz de Decisão Ponderada"), align="C",
                  new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.set_font("Helvetica", "", 8)
        self.cell(self.epw, 5, latin1(f"Gerado em {self._timestamp()}"), align="C")
        self.set_y(45)

    def _quote_info(self):
        report = self.report
        top = self.get_y()
        self.set_fill_color(*LIGHT_GRAY)
        self.rect(self.l_margin, top, self.epw, 25, style="F")

        half = (self.epw - 10) / 2
        self.set_text_color(*DARK_TEXT)
        self.set_xy(self.l_margin + 5, top + 4)
        self.set_font("Helvetica", "B", 11)
        self.cell(half, 6, latin1(f"Cotação: {report.quote_code}"))
        if report.client_name:
            self.set_font("Helvetica", "", 10)
            self.set_text_color(*MUTED_TEXT)
            self.cell(half, 6, latin1(f"Cliente: {report.client_name}"), align="R")

        self.set_xy(self.l_margin + 5, top + 12)
        self.set_font("Helvetica", "", 10)
        self.set_text_color(*DARK_TEXT)
        self.cell(half, 6, latin1(report.quote_name))
        self.cell(half, 6, f"{len(report.ranked_proposals)} propostas analisadas", align="R")
        self.set_y(top + 35)

    def _weights_row(self):
        self._section_title("CONFIGURAÇÃO DE PESOS")
        top = self.get_y()
        col_width = self.epw / len(WEIGHT_LABELS)

        for index, (field, label) in enumerate(WEIGHT_LABELS):
            x = self.l_margin + index * col_width
            self.set_fill_color(240, 245, 255)
            self.rect(x + 2, top, col_width - 4, 22, style="F")

            self.set_xy(x, top + 3)
            self.set_font("Helvetica", "", 8)
            self.set_text_color(*MUTED_TEXT)
            self.cell(col_width, 5, latin1(label), align="C")

            self.set_xy(x, top + 10)
            self.set_font("Helvetica", "B", 14)
            self.set_text_color(*PRIMARY)
            self.cell(col_width, 8, f"{getattr(self.report.weights, field):g}%", align="C")

        self.set_y(top + 30)

    def _table_header(self, headers, widths, fill):
        self.set_font("Helvetica", "B", 9)
        self.set_fill_color(*fill)
        self.set_text_color(255, 255, 255)
        for header, width in zip(headers, widths):
            self.cell(width, self.ROW_HEIGHT, latin1(header), align="C", fill=True)
        self.ln(self.ROW_HEIGHT)

    def _table(self, headers, widths, aligns, rows, fill=PRIMARY, highlight_first=False):
        self._table_header(headers, widths, fill)

        for index, row in enumerate(rows):
            if self.get_y() + self.ROW_HEIGHT > self.page_break_trigger:
                self.add_page()
                self._table_header(headers, widths, fill)

            if highlight_first and index == 0:
                self.set_fill_color(220, 252, 231)
                self.set_font("Helvetica", "B", 9)
            else:
                shade = 250 if index % 2 else 255
                self.set_fill_color(shade, shade, shade)
                self.set_font("Helvetica", "", 9)

            self.set_text_color(*DARK_TEXT)
            for value, width, align in zip(row, widths, aligns):
                self.cell(width, self.ROW_HEIGHT, latin1(value), align=align, fill=True)
            self.ln(self.ROW_HEIGHT)

        self.ln(5)

    def _winner_card(self):
        winner = self.report.winner
        if winner is None:
            return

        if self.get_y() > self.h - 70:
            self.add_page()

        self._section_title("PROPOSTA RECOMENDADA")
        top = self.get_y()
        self.set_draw_color(*ACCENT_GREEN)
        self.set_line_width(1.5)
        self.set_fill_color(240, 253, 244)
        self.rect(self.l_margin, top, self.epw, 45, style="FD")
        self.set_line_width(0.2)

        self.set_xy(self.l_margin + 8, top + 6)
        self.set_font("Helvetica", "B", 14)
        self.set_text_color(*DARK_TEXT)
        self.cell(self.epw - 60, 8, latin1(f"1º {winner.name}"))
        self.set_font("Helvetica", "B", 20)
        self.set_text_color(*ACCENT_GREEN)
        self.cell(44, 8, f"{format_score(winner.score)} pts", align="R")

        metrics = winner.metrics
        warranty = winner.proposal.warranty_months if winner.proposal else metrics.warranty
        details = [
            (f"Preço: {format_currency(metrics.price)}", f"Prazo: {format_days(metrics.delivery_time)}"),
            (f"Frete: {format_shipping(metrics.shipping_cost)}", f"Garantia: {format_months(warranty)}"),
        ]
        self.set_font("Helvetica", "", 10)
        self.set_text_color(80, 80, 80)
        for offset, (left, right) in zip((20, 30), details):
            self.set_xy(self.l_margin + 8, top + offset)
            self.cell(72, 6, latin1(left))
            self.cell(72, 6, latin1(right))

        self.set_y(top + 55)

    def _methodology(self):
        top = self.get_y()
        self.set_fill_color(*LIGHT_GRAY)
        self.rect(self.l_margin, top, self.epw, 25, style="F")

        self.set_xy(self.l_margin + 5, top + 3)
        self.set_font("Helvetica", "B", 8)
        self.set_text_color(*MUTED_TEXT)
        self.cell(0, 5, "Metodologia:", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        self.set_x(self.l_margin + 5)
        self.set_font("Helvetica", "", 8)
        self.multi_cell(self.epw - 10, 4, latin1(METHODOLOGY), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    def render(self) -> bytes:
        """Lay out every section and return the PDF document."""
        self.add_page()
        self._header_band()
        self._quote_info()
        self._weights_row()

        self._section_title("RANKING DAS PROPOSTAS")
        self._table(RANKING_HEADERS, RANKING_WIDTHS, RANKING_ALIGN,
                    ranking_rows(self.report), highlight_first=True)

        self._winner_card()

        if self.report.quote_items and self.get_y() < self.h - 60:
            self._section_title("ITENS DA COTAÇÃO")
            self._table(ITEM_HEADERS, ITEM_WIDTHS, ITEM_ALIGN,
                        item_rows(self.report), fill=(100, 116, 139))

        if self.get_y() < self.h - 40:
            self._methodology()

        return bytes(self.output())


def render_decision_matrix_pdf(report: DecisionMatrixReport) -> bytes:
    return DecisionMatrixPDF(report).render()


def export_decision_matrix_pdf(report: DecisionMatrixReport, output_dir: str = ".") -> Path:
    """Render the report and write it to ``output_dir``.

    Returns:
        Path of the written file
    """

    path = Path(output_dir) / pdf_filename(report)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(render_decision_matrix_pdf(report))

    logger.info(
        "Decision matrix PDF exported: quote=%s proposals=%d path=%s",
        report.quote_code, len(report.ranked_proposals), path
    )
    return path

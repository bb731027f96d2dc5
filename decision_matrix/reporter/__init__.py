"""Exports of ranked decision matrices: JSON comparison, snapshot and PDF."""

from .comparison import build_comparison, build_matrix_snapshot, export_comparison
from .pdf import DecisionMatrixPDF, export_decision_matrix_pdf, render_decision_matrix_pdf

__all__ = [
    "build_comparison",
    "build_matrix_snapshot",
    "export_comparison",
    "DecisionMatrixPDF",
    "export_decision_matrix_pdf",
    "render_decision_matrix_pdf",
]

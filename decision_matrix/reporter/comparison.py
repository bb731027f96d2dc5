"""JSON comparison export and saved-matrix snapshot."""

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from ..models import RankedProposal, WeightConfig
from .formatters import (
    format_currency,
    format_days,
    format_months,
    format_score,
)

logger = logging.getLogger(__name__)


def build_comparison(
    title: str,
    weights: WeightConfig,
    ranked: Sequence[RankedProposal]
) -> Dict[str, Any]:
    """Build the downloadable comparison document for a ranking."""
    results = []
    for proposal in ranked:
        metrics = proposal.metrics
        results.append({
            "posicao": proposal.position,
            "fornecedor": proposal.name,
            "preco": format_currency(metrics.price),
            "prazoEntrega": format_days(metrics.delivery_time),
            "frete": format_currency(metrics.shipping_cost),
            "sla": f"{metrics.sla:g}",
            "garantia": format_months(metrics.warranty),
            "reputacao": f"{metrics.reputation:g}",
            "scoreTotal": format_score(proposal.score),
        })

    return {
        "title": f"Comparação: {title}",
        "weights": weights.to_dict(),
        "results": results,
    }


def comparison_filename(title: str) -> str:
    slug = re.sub(r"[^\w-]+", "-", title.strip().lower()).strip("-")
    return f"comparacao-{slug}.json"


def export_comparison(
    title: str,
    weights: WeightConfig,
    ranked: Sequence[RankedProposal],
    output_dir: str = "."
) -> Path:
    """Write the comparison document as JSON and return its path."""
    path = Path(output_dir) / comparison_filename(title)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(build_comparison(title, weights, ranked), f, indent=2, ensure_ascii=False)

    logger.info("Comparison exported to %s", path)
    return path


def build_matrix_snapshot(
    quote_id: str,
    quote_title: str,
    weights: WeightConfig,
    ranked: Sequence[RankedProposal],
    name: Optional[str] = None
) -> Dict[str, Any]:
    """Payload handed to the persistence layer when a user saves a matrix."""
    return {
        "name": name or f"Matriz - {quote_title}",
        "quote_id": quote_id,
        "quote_title": quote_title,
        "weights": weights.to_dict(),
        "proposals": [
            {
                "id": p.id,
                "name": p.name,
                "score": p.score,
                "metrics": p.metrics.model_dump(by_alias=True),
            }
            for p in ranked
        ],
    }

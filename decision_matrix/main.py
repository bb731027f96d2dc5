"""Command line entry point: rank the proposals of a quotation.

Usage:
    decision-matrix rank proposals.json --template focoPreco --pdf out/
    decision-matrix templates
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import ValidationError

from .aggregation import build_candidates
from .config import Config, load_config
from .models import DecisionMatrixReport, QuoteItem, RankedProposal, WeightConfig
from .reporter import export_comparison, export_decision_matrix_pdf
from .reporter.formatters import format_currency, format_days, format_score, position_label, quote_code
from .scorer import (
    TEMPLATE_LABELS,
    WEIGHT_TEMPLATES,
    DecisionMatrixError,
    get_template,
    load_weights,
    rank_proposals,
    recommend_actions,
    validate_weights,
)

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    logging.getLogger().setLevel(level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="decision-matrix",
        description="Rank competing supplier proposals with a weighted decision matrix."
    )
    sub = parser.add_subparsers(dest="command", required=True)

    rank = sub.add_parser("rank", help="Score and rank the proposals in a JSON file")
    rank.add_argument("input", help="JSON file: list of proposals, or {quote, proposals, items}")
    source = rank.add_mutually_exclusive_group()
    source.add_argument("--template", choices=list(WEIGHT_TEMPLATES), help="Preset weight template")
    source.add_argument("--weights", help="JSON or YAML weights file")
    rank.add_argument("--pdf", nargs="?", const="", metavar="DIR",
                      help="Write the PDF report to DIR (default: configured output dir)")
    rank.add_argument("--json", nargs="?", const="", metavar="DIR",
                      help="Write the JSON comparison to DIR (default: configured output dir)")
    rank.add_argument("--quote-name", help="Quotation title (overrides the input file)")
    rank.add_argument("--quote-code", help="Quotation display code (overrides the input file)")
    rank.add_argument("--client-name", help="Client shown on the PDF header")

    sub.add_parser("templates", help="List the preset weight templates")
    return parser


def resolve_weights(args: argparse.Namespace, config: Config) -> WeightConfig:
    """Command line beats environment; a weights file beats a template."""
    if args.weights:
        return load_weights(args.weights)
    if args.template:
        return get_template(args.template)
    if config.weights_file:
        return load_weights(config.weights_file)
    return get_template(config.default_template)


def read_input(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, list):
        data = {"proposals": data}
    if not isinstance(data, dict):
        raise ValueError(
            f"Input must be a list of proposals or an object with 'proposals', got {type(data).__name__}"
        )

    parsed = {
        "quote": data.get("quote") or {},
        "proposals": data.get("proposals") or [],
        "items": data.get("items") or [],
    }
    if not isinstance(parsed["quote"], dict):
        raise ValueError("'quote' must be an object")
    for key in ("proposals", "items"):
        if not isinstance(parsed[key], list) or not all(isinstance(r, dict) for r in parsed[key]):
            raise ValueError(f"'{key}' must be a list of objects")
    return parsed


def print_ranking(ranked: Sequence[RankedProposal]) -> None:
    actions = {a.proposal_id: a for a in recommend_actions(ranked)}
    print(f"{'Pos':<5}{'Fornecedor':<30}{'Score':>7}  {'Preço':>16}  {'Prazo':>9}  Ações")
    for proposal in ranked:
        action = actions[proposal.id]
        offered = [action.approve_label]
        if action.show_negotiate:
            offered.append(action.negotiate_label)
        print(
            f"{position_label(proposal.position):<5}{proposal.name[:29]:<30}"
            f"{format_score(proposal.score):>7}  {format_currency(proposal.metrics.price):>16}  "
            f"{format_days(proposal.metrics.delivery_time):>9}  {' | '.join(offered)}"
        )


def run_rank(args: argparse.Namespace, config: Config) -> int:
    weights = resolve_weights(args, config)
    if not validate_weights(weights):
        logger.warning("Weights sum to %g, not 100; scores are not on a 0-100 scale", weights.total)

    data = read_input(args.input)
    quote = data["quote"]
    ranked = rank_proposals(build_candidates(data["proposals"]), weights)
    print_ranking(ranked)

    quote_name = args.quote_name or quote.get("name") or Path(args.input).stem
    code = args.quote_code or quote_code(
        str(quote.get("id") or quote_name), quote.get("local_code") or quote.get("localCode")
    )
    report = DecisionMatrixReport(
        quote_name=quote_name,
        quote_code=code,
        client_name=args.client_name or quote.get("client_name") or quote.get("clientName"),
        weights=weights,
        ranked_proposals=ranked,
        quote_items=[QuoteItem(**item) for item in data["items"]],
    )

    if args.pdf is not None:
        print(f"PDF: {export_decision_matrix_pdf(report, args.pdf or config.output_dir)}")
    if args.json is not None:
        print(f"JSON: {export_comparison(quote_name, weights, ranked, args.json or config.output_dir)}")
    return 0


def run_templates() -> int:
    for name, weights in WEIGHT_TEMPLATES.items():
        values = ", ".join(f"{k}={v:g}" for k, v in weights.to_dict().items())
        print(f"{name:<15}{TEMPLATE_LABELS[name]:<20}{values}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config()
    except ValueError as e:
        configure_logging()
        logger.error("%s", e)
        return 1

    configure_logging(config.log_level)

    if args.command == "templates":
        return run_templates()

    try:
        return run_rank(args, config)
    except (DecisionMatrixError, ValidationError, OSError, ValueError) as e:
        logger.error("Ranking failed: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())

"""Weight templates and weight configuration files.

Presets are the quick templates offered before manual adjustment; custom
templates can be kept in JSON or YAML files.
"""

import json
from pathlib import Path
from types import MappingProxyType
from typing import List, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, Field

from ..models.weights import WeightConfig
from .errors import UnbalancedWeightsError, UnknownTemplateError

WEIGHT_SUM_TOLERANCE = 0.01


EQUILIBRADO = WeightConfig(
    price=40,
    delivery_time=20,
    shipping_cost=15,
    sla=8,
    warranty=12,
    reputation=5
)

FOCO_PRECO = WeightConfig(
    price=65,  # Lowest total cost dominates
    delivery_time=10,
    shipping_cost=10,
    sla=5,
    warranty=5,
    reputation=5
)

FOCO_QUALIDADE = WeightConfig(
    price=15,
    delivery_time=10,
    shipping_cost=5,
    sla=25,
    warranty=25,
    reputation=20
)

URGENTE = WeightConfig(
    price=20,
    delivery_time=45,  # Fastest delivery dominates
    shipping_cost=10,
    sla=15,
    warranty=5,
    reputation=5
)

WEIGHT_TEMPLATES: Mapping[str, WeightConfig] = MappingProxyType({
    "equilibrado": EQUILIBRADO,
    "focoPreco": FOCO_PRECO,
    "focoQualidade": FOCO_QUALIDADE,
    "urgente": URGENTE,
})

TEMPLATE_LABELS: Mapping[str, str] = MappingProxyType({
    "equilibrado": "Equilibrado",
    "focoPreco": "Foco em Preço",
    "focoQualidade": "Foco em Qualidade",
    "urgente": "Urgente",
})

DEFAULT_TEMPLATE = "equilibrado"


class WeightTemplate(BaseModel):
    """A named, user-saved weight configuration."""

    name: str = Field(..., min_length=1)
    description: str = ""
    weights: WeightConfig

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "weights": self.weights.to_dict(),
        }


def validate_weights(weights: Union[WeightConfig, Mapping[str, float]]) -> bool:
    """Return True when the six weights sum to 100 (within 0.01).

    Accepts a WeightConfig or a plain mapping such as unsaved form state;
    only the six weight fields count, under either naming. Never raises:
    non-numeric values make the weights unbalanced.
    """

    if isinstance(weights, WeightConfig):
        total = weights.total
    else:
        try:
            total = sum(
                float(weights.get(field, weights.get(info.alias, 0)))
                for field, info in WeightConfig.model_fields.items()
            )
        except (TypeError, ValueError):
            return False
    return abs(total - 100) < WEIGHT_SUM_TOLERANCE


def get_template(name: str) -> WeightConfig:
    """Return the preset registered under ``name``.

    Raises:
        UnknownTemplateError: If no preset has that name
    """

    try:
        return WEIGHT_TEMPLATES[name]
    except KeyError:
        valid = ", ".join(WEIGHT_TEMPLATES)
        raise UnknownTemplateError(
            f"Unknown weight template '{name}'. Valid templates: {valid}"
        ) from None


def _read(path: Path):
    if not path.exists():
        raise FileNotFoundError(f"Weights file not found: {path}")

    if path.suffix == '.json':
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    elif path.suffix in ['.yaml', '.yml']:
        with open(path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f)
    raise ValueError(f"Unsupported file format: {path.suffix}. Use .json, .yaml, or .yml")


def _write(path: Path, data) -> None:
    if path.suffix == '.json':
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
    elif path.suffix in ['.yaml', '.yml']:
        with open(path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(data, f, default_flow_style=False, allow_unicode=True, sort_keys=False)
    else:
        raise ValueError(f"Unsupported file format: {path.suffix}")


def load_weights(filepath: Optional[str] = None) -> WeightConfig:
    """Load weights from file or return the default preset.

    Supports JSON and YAML formats. Keys may be camelCase or snake_case.

    Args:
        filepath: Optional path to weights configuration file

    Returns:
        WeightConfig instance

    Raises:
        FileNotFoundError: If filepath provided but doesn't exist
        ValueError: If the format is unsupported, a key is unknown or a
            weight is out of range (pydantic ValidationError)
    """

    if not filepath:
        return WEIGHT_TEMPLATES[DEFAULT_TEMPLATE]

    return WeightConfig.model_validate(_read(Path(filepath)))


def save_weights(weights: WeightConfig, filepath: str) -> None:
    """Save weights to file (extension determines format)."""
    _write(Path(filepath), weights.to_dict())


def load_templates(filepath: str) -> List[WeightTemplate]:
    """Load custom templates saved with ``save_templates``."""
    data = _read(Path(filepath)) or []
    return [WeightTemplate(**entry) for entry in data]


def save_templates(templates: List[WeightTemplate], filepath: str) -> None:
    """Save custom templates.

    Raises:
        UnbalancedWeightsError: If any template's weights do not sum to 100
    """

    for template in templates:
        if not validate_weights(template.weights):
            raise UnbalancedWeightsError(
                f"Template '{template.name}' weights sum to {template.weights.total:g}, expected 100"
            )
    _write(Path(filepath), [t.to_dict() for t in templates])

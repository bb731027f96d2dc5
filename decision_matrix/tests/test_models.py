"""Tests for ProposalMetrics validation."""

import math

import pytest
from pydantic import ValidationError

from decision_matrix.models import ProposalMetrics


def _metrics(**overrides) -> ProposalMetrics:
    defaults = dict(price=100, delivery_time=5, shipping_cost=0, sla=90, warranty=12, reputation=4.5)
    defaults.update(overrides)
    return ProposalMetrics(**defaults)


def test_camel_case_aliases():
    metrics = ProposalMetrics(**{
        "price": 100, "deliveryTime": 5, "shippingCost": 10, "sla": 90, "warranty": 12, "reputation": 4,
    })
    assert metrics.delivery_time == 5
    assert metrics.model_dump(by_alias=True)["shippingCost"] == 10


@pytest.mark.parametrize("field", ["price", "delivery_time", "shipping_cost", "sla", "warranty", "reputation"])
def test_negative_values_rejected(field):
    with pytest.raises(ValidationError):
        _metrics(**{field: -1})


@pytest.mark.parametrize("value", [math.inf, math.nan])
def test_non_finite_values_rejected(value):
    with pytest.raises(ValidationError):
        _metrics(price=value)


def test_all_fields_required():
    with pytest.raises(ValidationError):
        ProposalMetrics(price=100, delivery_time=5)


def test_free_shipping_allowed():
    assert _metrics(shipping_cost=0).shipping_cost == 0


def test_metrics_are_immutable():
    metrics = _metrics()
    with pytest.raises(ValidationError):
        metrics.price = 1

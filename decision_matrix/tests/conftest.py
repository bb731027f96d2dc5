"""Pytest configuration and fixtures."""

import pytest

from decision_matrix.models import Candidate, ProposalMetrics, QuoteProposal


@pytest.fixture
def proposal_a():
    return ProposalMetrics(price=1000, delivery_time=5, shipping_cost=0, sla=95, warranty=12, reputation=90)


@pytest.fixture
def proposal_b():
    return ProposalMetrics(price=800, delivery_time=10, shipping_cost=50, sla=80, warranty=6, reputation=70)


@pytest.fixture
def proposal_c():
    return ProposalMetrics(price=1200, delivery_time=3, shipping_cost=20, sla=99, warranty=24, reputation=95)


@pytest.fixture
def cohort(proposal_a, proposal_b, proposal_c):
    """Three proposals competing for the same quotation."""
    return [proposal_a, proposal_b, proposal_c]


@pytest.fixture
def candidates(proposal_a, proposal_b, proposal_c):
    return [
        Candidate(id="prop-a", name="Alfa Suprimentos", metrics=proposal_a),
        Candidate(id="prop-b", name="Beta Distribuidora", metrics=proposal_b),
        Candidate(id="prop-c", name="Gama Comercial", metrics=proposal_c),
    ]


@pytest.fixture
def sample_proposal_records():
    """Proposal rows as returned by the quotation API (camelCase)."""
    return [
        {
            "id": "prop-a",
            "supplierId": "sup-1",
            "supplierName": "Alfa Suprimentos",
            "totalPrice": 1000.0,
            "deliveryTime": 5,
            "shippingCost": 0,
            "deliveryScore": 95,
            "warrantyMonths": 12,
            "reputation": 90,
            "paymentTerms": "30 dias",
        },
        {
            "id": "prop-b",
            "supplierId": "sup-2",
            "supplierName": "Beta Distribuidora",
            "totalPrice": 800.0,
            "deliveryTime": 10,
            "shippingCost": 50,
            "deliveryScore": 80,
            "warrantyMonths": 6,
            "reputation": 70,
        },
        {
            "id": "prop-c",
            "supplierId": "sup-3",
            "supplierName": "Gama Comercial",
            "totalPrice": 1200.0,
            "deliveryTime": 3,
            "shippingCost": 20,
            "deliveryScore": 99,
            "warrantyMonths": 24,
            "reputation": 95,
        },
    ]


@pytest.fixture
def quote_proposal():
    return QuoteProposal(
        id="prop-a",
        supplier_name="Alfa Suprimentos",
        total_price=1000.0,
        delivery_time=5,
        shipping_cost=0,
        delivery_score=95,
        warranty_months=12,
        reputation=90,
    )

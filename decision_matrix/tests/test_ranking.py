"""Tests for ranking and recommended actions."""

import logging

import pytest

from decision_matrix.models import Candidate, DimensionScores, ProposalMetrics, RankedProposal, WeightConfig
from decision_matrix.scorer import (
    InvalidCohortError,
    WEIGHT_TEMPLATES,
    calculate_weighted_score,
    rank_proposals,
    recommend_actions,
)


def _ranked(position: int, score: float, metrics: ProposalMetrics) -> RankedProposal:
    flat = DimensionScores(price=0, delivery_time=0, shipping_cost=0, sla=0, warranty=0, reputation=0)
    return RankedProposal(
        position=position,
        id=f"p{position}",
        name=f"Fornecedor {position}",
        score=score,
        metrics=metrics,
        breakdown=flat,
    )


class TestRankProposals:
    def test_balanced_ranking(self, candidates):
        ranked = rank_proposals(candidates, WEIGHT_TEMPLATES["equilibrado"])

        assert [r.id for r in ranked] == ["prop-a", "prop-c", "prop-b"]
        assert [r.score for r in ranked] == [63.6, 54.0, 40.0]
        assert [r.position for r in ranked] == [1, 2, 3]
        assert ranked[0].is_winner
        assert not ranked[1].is_winner

    def test_price_focus_ranking(self, candidates):
        ranked = rank_proposals(candidates, WEIGHT_TEMPLATES["focoPreco"])
        assert [r.id for r in ranked] == ["prop-b", "prop-a", "prop-c"]

    def test_quality_focus_ranking(self, candidates):
        ranked = rank_proposals(candidates, WEIGHT_TEMPLATES["focoQualidade"])
        assert ranked[0].name == "Gama Comercial"
        assert ranked[0].score == 83.0

    def test_scores_match_single_proposal_scoring(self, candidates):
        weights = WEIGHT_TEMPLATES["urgente"]
        cohort = [c.metrics for c in candidates]
        ranked = rank_proposals(candidates, weights)

        for r in ranked:
            assert r.score == calculate_weighted_score(r.metrics, cohort, weights)

    def test_breakdown_attached(self, candidates):
        ranked = rank_proposals(candidates, WEIGHT_TEMPLATES["equilibrado"])
        cheapest = next(r for r in ranked if r.id == "prop-b")
        assert cheapest.breakdown.price == pytest.approx(100)
        assert cheapest.breakdown.shipping_cost == pytest.approx(0)

    def test_ties_keep_input_order(self, proposal_a):
        twins = [
            Candidate(id=f"dup-{i}", name=f"Fornecedor {i}", metrics=proposal_a)
            for i in range(4)
        ]
        ranked = rank_proposals(twins, WEIGHT_TEMPLATES["equilibrado"])

        assert [r.id for r in ranked] == ["dup-0", "dup-1", "dup-2", "dup-3"]
        assert {r.score for r in ranked} == {50.0}

    def test_ties_among_mixed_scores_keep_input_order(self, proposal_a, proposal_b):
        candidates = [
            Candidate(id="low", name="Baixo", metrics=proposal_b),
            Candidate(id="tie-1", name="Empate 1", metrics=proposal_a),
            Candidate(id="tie-2", name="Empate 2", metrics=proposal_a),
        ]
        ranked = rank_proposals(candidates, WeightConfig(sla=100))
        assert [r.id for r in ranked] == ["tie-1", "tie-2", "low"]

    def test_input_not_mutated(self, candidates):
        order = [c.id for c in candidates]
        rank_proposals(candidates, WEIGHT_TEMPLATES["focoPreco"])
        assert [c.id for c in candidates] == order

    def test_empty_cohort(self):
        with pytest.raises(InvalidCohortError):
            rank_proposals([], WEIGHT_TEMPLATES["equilibrado"])

    def test_logs_leader(self, candidates, caplog):
        with caplog.at_level(logging.INFO, logger="decision_matrix.scorer.ranking"):
            rank_proposals(candidates, WEIGHT_TEMPLATES["equilibrado"])
        assert "Ranked 3 proposals: leader=Alfa Suprimentos score=63.6" in caplog.text


class TestRecommendActions:
    def test_leader_and_runner_up(self, candidates):
        ranked = rank_proposals(candidates, WEIGHT_TEMPLATES["equilibrado"])
        leader, second, third = recommend_actions(ranked)

        assert leader.approve_label == "Aprovar Melhor Proposta"
        assert not leader.show_negotiate
        assert leader.points_behind == 0.0

        assert second.approve_label == "Aprovar Proposta"
        assert second.show_negotiate
        assert second.points_behind == 9.6
        assert second.negotiate_label == "Tentar Negociar (9.6 pts do líder)"

        assert third.show_negotiate
        assert third.negotiate_label == "Negociar com IA"
        assert third.points_behind == 23.6

    def test_approve_always_offered(self, candidates):
        ranked = rank_proposals(candidates, WEIGHT_TEMPLATES["urgente"])
        assert all(a.show_approve for a in recommend_actions(ranked))

    def test_viable_proposal_below_top_three(self, proposal_a):
        ranked = [
            _ranked(1, 90.0, proposal_a),
            _ranked(2, 88.0, proposal_a),
            _ranked(3, 85.0, proposal_a),
            _ranked(4, 78.0, proposal_a),
            _ranked(5, 74.9, proposal_a),
            _ranked(6, 69.9, proposal_a),
        ]
        actions = recommend_actions(ranked)

        assert [a.show_negotiate for a in actions] == [False, True, True, True, False, False]
        assert actions[3].points_behind == 12.0
        assert actions[4].points_behind == 15.1

    def test_low_score_outside_top_three(self, proposal_a):
        ranked = [_ranked(i, score, proposal_a) for i, score in enumerate([60.0, 58.0, 57.0, 56.0], start=1)]
        actions = recommend_actions(ranked)
        assert actions[3].show_negotiate is False

    def test_empty_ranking(self):
        assert recommend_actions([]) == []

# tests/test_tally.py

import logging

from stakeview.models import (
    DelegatorSuggestion,
    Tally,
    Validator,
    ValidatorVote,
)
from stakeview.tally import proposal_consensus, validator_suggestion_breakdown


VALIDATORS = [
    Validator(id="A", name="A", total_stake=100),
    Validator(id="B", name="B", total_stake=200),
    Validator(id="C", name="C", total_stake=400),
]


def _vote(validator_id, vote, proposal_id="propX"):
    return ValidatorVote(proposal_id=proposal_id, validator_id=validator_id, vote=vote)


def _suggest(delegator_id, vote, stake, validator_id="V", proposal_id="propY"):
    return DelegatorSuggestion(
        proposal_id=proposal_id,
        delegator_id=delegator_id,
        validator_id=validator_id,
        vote=vote,
        stake_weight=stake,
    )


# ============================================================
# proposal_consensus
# ============================================================

def test_consensus_sums_validator_stake_per_vote():
    votes = [_vote("A", "Yes"), _vote("B", "No")]
    assert proposal_consensus(votes, VALIDATORS) == Tally(yes=100, no=200, abstain=0)


def test_consensus_without_votes_is_zero():
    assert proposal_consensus([], VALIDATORS) == Tally(yes=0, no=0, abstain=0)


def test_pending_votes_are_not_counted():
    votes = [_vote("A", "Pending"), _vote("B", "Abstain"), _vote("C", "Yes")]
    result = proposal_consensus(votes, VALIDATORS)

    assert result == Tally(yes=400, no=0, abstain=200)
    # strictly below the stake of every validator that voted
    assert result.total < sum(v.total_stake for v in VALIDATORS)


def test_total_equals_voting_stake_when_nothing_pending():
    votes = [_vote("A", "Yes"), _vote("B", "No"), _vote("C", "Abstain")]
    assert proposal_consensus(votes, VALIDATORS).total == 700


def test_unknown_validator_is_skipped_and_logged(caplog):
    votes = [_vote("A", "Yes"), _vote("ghost", "Yes")]

    with caplog.at_level(logging.WARNING, logger="stakeview.tally"):
        result = proposal_consensus(votes, VALIDATORS)

    assert result == Tally(yes=100)
    assert "ghost" in caplog.text


# ============================================================
# validator_suggestion_breakdown
# ============================================================

def test_breakdown_single_delegator():
    suggestions = [_suggest("D", "Yes", 500)]
    result = validator_suggestion_breakdown(suggestions, "propY", "V")
    assert result == Tally(yes=500, no=0, abstain=0)


def test_breakdown_filters_by_proposal_and_validator():
    suggestions = [
        _suggest("D", "Yes", 500),
        _suggest("E", "No", 50),
        _suggest("F", "Abstain", 7),
        _suggest("G", "Yes", 1000, validator_id="W"),
        _suggest("H", "Yes", 1000, proposal_id="propZ"),
        _suggest("I", "Pending", 1000),
    ]
    result = validator_suggestion_breakdown(suggestions, "propY", "V")
    assert result == Tally(yes=500, no=50, abstain=7)


def test_breakdown_is_zero_filled():
    result = validator_suggestion_breakdown([], "propY", "V")
    assert (result.yes, result.no, result.abstain) == (0, 0, 0)

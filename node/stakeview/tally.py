# stake-weighted aggregation (pure, never mutates)
import logging
from typing import Dict, Iterable
from .models import DelegatorSuggestion, Tally, Validator, ValidatorVote, VoteOption

log = logging.getLogger(__name__)


def _add(buckets: Dict[VoteOption, float], vote: VoteOption, weight: float) -> None:
    # Pending is "not cast yet": never counted
    if vote in buckets:
        buckets[vote] += weight


def _empty_buckets() -> Dict[VoteOption, float]:
    return {VoteOption.YES: 0, VoteOption.NO: 0, VoteOption.ABSTAIN: 0}


def _to_tally(buckets: Dict[VoteOption, float]) -> Tally:
    return Tally(
        yes=buckets[VoteOption.YES],
        no=buckets[VoteOption.NO],
        abstain=buckets[VoteOption.ABSTAIN],
    )


def proposal_consensus(
    votes: Iterable[ValidatorVote], validators: Iterable[Validator]
) -> Tally:
    """
    Sum each voting validator's total_stake into the bucket of its vote.

    Votes from validators that cannot be found are skipped (and logged) so
    the rest of the tally still completes. No votes -> Tally(0, 0, 0).
    """
    stake_by_validator = {v.id: v.total_stake for v in validators}
    buckets = _empty_buckets()

    for vote in votes:
        stake = stake_by_validator.get(vote.validator_id)
        if stake is None:
            log.warning(
                "skipping vote on %s from unknown validator %s",
                vote.proposal_id,
                vote.validator_id,
            )
            continue
        _add(buckets, vote.vote, stake)

    return _to_tally(buckets)


def validator_suggestion_breakdown(
    suggestions: Iterable[DelegatorSuggestion], proposal_id: str, validator_id: str
) -> Tally:
    """
    Sum the stake_weight of delegator suggestions addressed to one validator
    on one proposal. All three buckets are always present, zero-filled.
    """
    buckets = _empty_buckets()
    for s in suggestions:
        if s.proposal_id == proposal_id and s.validator_id == validator_id:
            _add(buckets, s.vote, s.stake_weight)
    return _to_tally(buckets)

# the only write path into the store
import logging
import math
from typing import Any, Optional, Union
from .errors import InvalidArgumentError, NotFoundError
from .models import DelegatorSuggestion, VoteOption
from .store import EntityStore

log = logging.getLogger(__name__)


def parse_vote(vote: Any) -> VoteOption:
    try:
        return VoteOption(vote)
    except (ValueError, TypeError):
        allowed = ", ".join(o.value for o in VoteOption)
        raise InvalidArgumentError(
            f"invalid vote {vote!r}, expected one of: {allowed}"
        ) from None


class SuggestionMutator:
    def __init__(self, store: EntityStore) -> None:
        self.store = store

    def cast_suggestion(
        self,
        proposal_id: str,
        delegator_id: str,
        validator_id: Optional[str],
        vote: Union[VoteOption, str],
        stake_weight: Optional[float],
    ) -> DelegatorSuggestion:
        """
        Record (or replace) a delegator's suggestion on a proposal.

        validator_id and stake_weight default to the delegator's current
        validator and stake when None. The stake is snapshotted into the
        suggestion; later stake changes do not affect it.

        Raises NotFoundError for an unknown delegator, proposal or validator,
        and InvalidArgumentError for a bad vote, a negative stake or a
        validator the delegator does not delegate to.
        """
        delegator = self.store.find_delegator(delegator_id)
        if delegator is None:
            raise NotFoundError(f"delegator not found: {delegator_id}")

        option = parse_vote(vote)

        if self.store.get_proposal(proposal_id) is None:
            raise NotFoundError(f"proposal not found: {proposal_id}")

        if validator_id is None:
            validator_id = delegator.delegated_to_validator_id
        if self.store.get_validator(validator_id) is None:
            raise NotFoundError(f"validator not found: {validator_id}")
        if validator_id != delegator.delegated_to_validator_id:
            raise InvalidArgumentError(
                f"delegator {delegator_id} delegates to "
                f"{delegator.delegated_to_validator_id}, not {validator_id}"
            )

        if stake_weight is None:
            stake_weight = delegator.stake_amount
        if (
            isinstance(stake_weight, bool)
            or not isinstance(stake_weight, (int, float))
            or math.isnan(stake_weight)
            or stake_weight < 0
        ):
            raise InvalidArgumentError(
                f"stake weight must be a number >= 0, got {stake_weight!r}"
            )

        suggestion = DelegatorSuggestion(
            proposal_id=proposal_id,
            delegator_id=delegator_id,
            validator_id=validator_id,
            vote=option,
            stake_weight=stake_weight,
        )
        previous = self.store.replace_suggestion(suggestion)

        log.info(
            "suggestion %s on %s by %s (stake %s)%s",
            option.value,
            proposal_id,
            delegator_id,
            stake_weight,
            f", replacing {previous.vote.value}" if previous else "",
        )
        return suggestion

from typing import List, Optional
from .errors import NotFoundError
from .models import (
    Delegator,
    DelegatorSuggestion,
    Proposal,
    ProposalDetail,
    ProposalWithTallies,
    Tally,
    Validator,
    ValidatorVote,
)
from .store import EntityStore
from . import tally


class ConsensusQueries:
    """
    Read side used by the presentation layer. Holds no state of its own:
    every call reads the store and recomputes tallies from scratch.
    """

    def __init__(self, store: EntityStore) -> None:
        self.store = store

    # ----------- pass-through reads -----------

    def list_proposals(self) -> List[Proposal]:
        return self.store.list_proposals()

    def list_validators(self) -> List[Validator]:
        return self.store.list_validators()

    def list_validator_votes(self, proposal_id: str) -> List[ValidatorVote]:
        return self.store.list_validator_votes(proposal_id)

    def list_delegators(self) -> List[Delegator]:
        return self.store.list_delegators()

    def find_delegator(self, delegator_id: str) -> Optional[Delegator]:
        return self.store.find_delegator(delegator_id)

    def get_delegator(self, delegator_id: str) -> Delegator:
        delegator = self.store.find_delegator(delegator_id)
        if delegator is None:
            raise NotFoundError(f"delegator not found: {delegator_id}")
        return delegator

    def list_suggestions(self, proposal_id: str) -> List[DelegatorSuggestion]:
        return self.store.list_suggestions(proposal_id)

    # ----------- tallies -----------

    def _require_proposal(self, proposal_id: str) -> Proposal:
        proposal = self.store.get_proposal(proposal_id)
        if proposal is None:
            raise NotFoundError(f"proposal not found: {proposal_id}")
        return proposal

    def proposal_consensus(self, proposal_id: str) -> Tally:
        self._require_proposal(proposal_id)
        return tally.proposal_consensus(
            self.store.list_validator_votes(proposal_id),
            self.store.list_validators(),
        )

    def validator_suggestion_breakdown(self, proposal_id: str, validator_id: str) -> Tally:
        self._require_proposal(proposal_id)
        if self.store.get_validator(validator_id) is None:
            raise NotFoundError(f"validator not found: {validator_id}")
        return tally.validator_suggestion_breakdown(
            self.store.list_suggestions(proposal_id), proposal_id, validator_id
        )

    def _with_tallies(self, proposal: Proposal) -> ProposalWithTallies:
        totals = tally.proposal_consensus(
            self.store.list_validator_votes(proposal.id),
            self.store.list_validators(),
        )
        return ProposalWithTallies(
            **proposal.model_dump(),
            total_yes_stake=totals.yes,
            total_no_stake=totals.no,
            total_abstain_stake=totals.abstain,
        )

    def get_proposals_with_tallies(self) -> List[ProposalWithTallies]:
        return [self._with_tallies(p) for p in self.store.list_proposals()]

    def get_proposal_detail(self, proposal_id: str) -> ProposalDetail:
        """
        Proposal (with totals), its validator votes, the delegator suggestions
        made on it, and a suggestion tally for each validator that voted.
        """
        proposal = self._require_proposal(proposal_id)
        votes = self.store.list_validator_votes(proposal_id)
        # one snapshot so the breakdowns agree with the listed suggestions
        suggestions = self.store.list_suggestions(proposal_id)

        breakdowns = {
            v.validator_id: tally.validator_suggestion_breakdown(
                suggestions, proposal_id, v.validator_id
            )
            for v in votes
            if self.store.get_validator(v.validator_id) is not None
        }
        return ProposalDetail(
            proposal=self._with_tallies(proposal),
            validator_votes=votes,
            delegator_suggestions=suggestions,
            suggestion_breakdowns=breakdowns,
        )

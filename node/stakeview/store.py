# in-memory entity collections
import threading
from typing import Dict, Iterable, List, Optional, Tuple
from .errors import InvalidArgumentError
from .models import (
    Delegator,
    DelegatorSuggestion,
    Proposal,
    ValidatorVote,
    Validator,
)

# (proposal_id, delegator_id)
SuggestionKey = Tuple[str, str]


def _index_by_id(items, kind: str) -> dict:
    index = {}
    for item in items:
        if item.id in index:
            raise InvalidArgumentError(f"duplicate {kind} id: {item.id}")
        index[item.id] = item
    return index


class EntityStore:
    """
    Owns the five collections of the engine.

    Proposals, validators, validator votes and delegators are fixed at
    construction. Suggestions are kept in a dict keyed by
    (proposal_id, delegator_id), so there is at most one per pair; they
    change only through replace_suggestion().
    """

    def __init__(
        self,
        proposals: Iterable[Proposal] = (),
        validators: Iterable[Validator] = (),
        validator_votes: Iterable[ValidatorVote] = (),
        delegators: Iterable[Delegator] = (),
        suggestions: Iterable[DelegatorSuggestion] = (),
    ) -> None:
        # dicts keep insertion order, which is the stable listing order
        self._proposals: Dict[str, Proposal] = _index_by_id(proposals, "proposal")
        self._validators: Dict[str, Validator] = _index_by_id(validators, "validator")
        self._delegators: Dict[str, Delegator] = _index_by_id(delegators, "delegator")

        # votes may reference validators that no longer exist; tallying skips them
        self._votes: Dict[Tuple[str, str], ValidatorVote] = {}
        for v in validator_votes:
            key = (v.proposal_id, v.validator_id)
            if key in self._votes:
                raise InvalidArgumentError(
                    f"validator {v.validator_id} voted twice on {v.proposal_id}"
                )
            self._votes[key] = v

        for d in self._delegators.values():
            if d.delegated_to_validator_id not in self._validators:
                raise InvalidArgumentError(
                    f"delegator {d.id} delegates to unknown validator "
                    f"{d.delegated_to_validator_id}"
                )

        self._lock = threading.Lock()
        self._suggestions: Dict[SuggestionKey, DelegatorSuggestion] = {}
        for s in suggestions:
            key = (s.proposal_id, s.delegator_id)
            if key in self._suggestions:
                raise InvalidArgumentError(
                    f"delegator {s.delegator_id} suggested twice on {s.proposal_id}"
                )
            if s.proposal_id not in self._proposals:
                raise InvalidArgumentError(
                    f"suggestion on unknown proposal {s.proposal_id}"
                )
            delegator = self._delegators.get(s.delegator_id)
            if delegator is None:
                raise InvalidArgumentError(
                    f"suggestion from unknown delegator {s.delegator_id}"
                )
            if s.validator_id != delegator.delegated_to_validator_id:
                raise InvalidArgumentError(
                    f"delegator {s.delegator_id} delegates to "
                    f"{delegator.delegated_to_validator_id}, not {s.validator_id}"
                )
            self._suggestions[key] = s

    # ----------- read-only seed collections -----------

    def list_proposals(self) -> List[Proposal]:
        return list(self._proposals.values())

    def get_proposal(self, proposal_id: str) -> Optional[Proposal]:
        return self._proposals.get(proposal_id)

    def list_validators(self) -> List[Validator]:
        return list(self._validators.values())

    def get_validator(self, validator_id: str) -> Optional[Validator]:
        return self._validators.get(validator_id)

    def list_validator_votes(self, proposal_id: str) -> List[ValidatorVote]:
        """
        All votes on a proposal; empty list when nobody voted (or the id is unknown).
        """
        return [v for v in self._votes.values() if v.proposal_id == proposal_id]

    def list_delegators(self) -> List[Delegator]:
        return list(self._delegators.values())

    def find_delegator(self, delegator_id: str) -> Optional[Delegator]:
        return self._delegators.get(delegator_id)

    # ----------- suggestions (the only mutable set) -----------

    def list_suggestions(self, proposal_id: str) -> List[DelegatorSuggestion]:
        with self._lock:
            snapshot = list(self._suggestions.values())
        return [s for s in snapshot if s.proposal_id == proposal_id]

    def replace_suggestion(
        self, suggestion: DelegatorSuggestion
    ) -> Optional[DelegatorSuggestion]:
        """
        Drop any suggestion for the same (proposal, delegator) and store the
        new one, as a single step. Returns the replaced suggestion, if any.
        """
        key = (suggestion.proposal_id, suggestion.delegator_id)
        with self._lock:
            previous = self._suggestions.pop(key, None)
            self._suggestions[key] = suggestion
        return previous

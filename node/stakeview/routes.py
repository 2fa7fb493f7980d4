# HTTP endpoints over the query facade + suggestion mutator
from typing import List, Optional
from fastapi import APIRouter, Depends, Request
from .config import DEMO_DELEGATOR_ID
from .models import (
    Delegator,
    DelegatorSuggestion,
    ProposalDetail,
    ProposalWithTallies,
    SuggestionIn,
    Tally,
    Validator,
    ValidatorVote,
    WalletConnectIn,
)
from .queries import ConsensusQueries
from .suggestions import SuggestionMutator

router = APIRouter()


def get_queries(request: Request) -> ConsensusQueries:
    return request.app.state.queries


def get_mutator(request: Request) -> SuggestionMutator:
    return request.app.state.mutator


# ----------- proposals -----------

@router.get("/proposals")
def list_proposals(q: ConsensusQueries = Depends(get_queries)) -> List[ProposalWithTallies]:
    return q.get_proposals_with_tallies()


@router.get("/proposals/{proposal_id}")
def get_proposal(proposal_id: str, q: ConsensusQueries = Depends(get_queries)) -> ProposalDetail:
    return q.get_proposal_detail(proposal_id)


@router.get("/proposals/{proposal_id}/consensus")
def get_consensus(proposal_id: str, q: ConsensusQueries = Depends(get_queries)) -> Tally:
    return q.proposal_consensus(proposal_id)


@router.get("/proposals/{proposal_id}/votes")
def get_votes(proposal_id: str, q: ConsensusQueries = Depends(get_queries)) -> List[ValidatorVote]:
    return q.list_validator_votes(proposal_id)


@router.get("/proposals/{proposal_id}/suggestions")
def get_suggestions(
    proposal_id: str, q: ConsensusQueries = Depends(get_queries)
) -> List[DelegatorSuggestion]:
    return q.list_suggestions(proposal_id)


@router.get("/proposals/{proposal_id}/validators/{validator_id}/suggestions")
def get_suggestion_breakdown(
    proposal_id: str, validator_id: str, q: ConsensusQueries = Depends(get_queries)
) -> Tally:
    return q.validator_suggestion_breakdown(proposal_id, validator_id)


@router.post("/proposals/{proposal_id}/suggestions")
def cast_suggestion(
    proposal_id: str,
    body: SuggestionIn,
    m: SuggestionMutator = Depends(get_mutator),
) -> DelegatorSuggestion:
    return m.cast_suggestion(
        proposal_id,
        body.delegator_id,
        body.validator_id,
        body.vote,
        body.stake_weight,
    )


# ----------- validators / delegators -----------

@router.get("/validators")
def list_validators(q: ConsensusQueries = Depends(get_queries)) -> List[Validator]:
    return q.list_validators()


@router.get("/delegators")
def list_delegators(q: ConsensusQueries = Depends(get_queries)) -> List[Delegator]:
    return q.list_delegators()


@router.get("/delegators/{delegator_id}")
def get_delegator(delegator_id: str, q: ConsensusQueries = Depends(get_queries)) -> Delegator:
    return q.get_delegator(delegator_id)


@router.post("/wallet/connect")
def wallet_connect(
    body: Optional[WalletConnectIn] = None,
    q: ConsensusQueries = Depends(get_queries),
):
    """
    Simulated wallet connect: resolves a delegator identity, no signatures.
    """
    delegator_id = body.delegator_id if body and body.delegator_id else DEMO_DELEGATOR_ID
    delegator = q.get_delegator(delegator_id)
    return {"ok": True, "delegator": delegator.model_dump(mode="json")}

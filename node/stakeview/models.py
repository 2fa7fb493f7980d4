from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class VoteOption(str, Enum):
    YES = "Yes"
    NO = "No"
    ABSTAIN = "Abstain"
    # Reserved: "not yet cast", never counted in a tally
    PENDING = "Pending"


class ProposalStatus(str, Enum):
    ACTIVE = "Active"
    CLOSED = "Closed"


class Entity(BaseModel):
    model_config = ConfigDict(frozen=True)


class Proposal(Entity):
    id: str = Field(..., examples=["prop1"])
    title: str
    description: str = ""
    status: ProposalStatus = ProposalStatus.ACTIVE
    creation_date: datetime


class Validator(Entity):
    id: str = Field(..., examples=["val1"])
    name: str
    total_stake: float = Field(..., ge=0)
    avatar_url: Optional[str] = None


class ValidatorVote(Entity):
    proposal_id: str
    validator_id: str
    vote: VoteOption


class Delegator(Entity):
    id: str = Field(..., examples=["delegator1_wallet_address_xxxxxxxxxxxx"])
    name: str = ""
    stake_amount: float = Field(..., ge=0)
    delegated_to_validator_id: str


class DelegatorSuggestion(Entity):
    """
    Non-binding vote a delegator would like its validator to cast.
    stake_weight is the delegator's stake when the suggestion was made.
    """
    proposal_id: str
    delegator_id: str
    validator_id: str
    vote: VoteOption
    stake_weight: float = Field(..., ge=0)


class Tally(Entity):
    """
    Stake-weighted totals per vote value. Pending is never counted.
    """
    yes: float = 0
    no: float = 0
    abstain: float = 0

    @property
    def total(self) -> float:
        return self.yes + self.no + self.abstain


class ProposalWithTallies(Proposal):
    total_yes_stake: float = 0
    total_no_stake: float = 0
    total_abstain_stake: float = 0


class ProposalDetail(BaseModel):
    proposal: ProposalWithTallies
    validator_votes: List[ValidatorVote]
    delegator_suggestions: List[DelegatorSuggestion]
    # validator_id -> suggestion tally, for every validator that voted
    suggestion_breakdowns: Dict[str, Tally] = Field(default_factory=dict)


class SuggestionIn(BaseModel):
    """
    Body of a suggestion cast. vote and stake_weight are checked by the
    engine so invalid values surface as InvalidArgumentError, not 422.
    validator_id / stake_weight default to the delegator's current values.
    """
    delegator_id: str = Field(..., examples=["delegator1_wallet_address_xxxxxxxxxxxx"])
    vote: Any = Field(..., examples=["Yes"])
    validator_id: Optional[str] = None
    stake_weight: Optional[float] = None


class WalletConnectIn(BaseModel):
    delegator_id: Optional[str] = None


class SeedData(BaseModel):
    """
    Full initial state of a store, as loaded from a seed file.
    """
    proposals: List[Proposal] = Field(default_factory=list)
    validators: List[Validator] = Field(default_factory=list)
    validator_votes: List[ValidatorVote] = Field(default_factory=list)
    delegators: List[Delegator] = Field(default_factory=list)
    suggestions: List[DelegatorSuggestion] = Field(default_factory=list)

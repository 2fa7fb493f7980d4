"""
Stake-weighted consensus viewer: validator vote tallies and delegator
suggestions over an in-memory store.
"""

from .errors import EngineError, InvalidArgumentError, NotFoundError
from .models import ProposalStatus, Tally, VoteOption
from .queries import ConsensusQueries
from .seed import default_store, load_seed
from .store import EntityStore
from .suggestions import SuggestionMutator

__all__ = [
    "ConsensusQueries",
    "EngineError",
    "EntityStore",
    "InvalidArgumentError",
    "NotFoundError",
    "ProposalStatus",
    "SuggestionMutator",
    "Tally",
    "VoteOption",
    "default_store",
    "load_seed",
]

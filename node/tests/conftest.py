import pytest
from fastapi.testclient import TestClient

from stakeview.main import create_app
from stakeview.models import Delegator, Proposal, Validator, ValidatorVote
from stakeview.queries import ConsensusQueries
from stakeview.seed import default_store
from stakeview.store import EntityStore
from stakeview.suggestions import SuggestionMutator

ALICE = "delegator1_wallet_address_xxxxxxxxxxxx"
BOB = "delegator2_wallet_address_yyyyyyyyyyyy"
CAROL = "delegator3_wallet_address_zzzzzzzzzzzz"


@pytest.fixture
def store():
    """Fresh demo store per test, so suggestions never leak between tests."""
    return default_store()


@pytest.fixture
def queries(store):
    return ConsensusQueries(store)


@pytest.fixture
def mutator(store):
    return SuggestionMutator(store)


@pytest.fixture
def client(store):
    return TestClient(create_app(store))


@pytest.fixture
def small_store():
    """
    Two validators (A: 100, B: 200), one delegator D (500, delegating to V)
    and three proposals: propX voted A=Yes/B=No, propY and propEmpty unvoted.
    """
    proposals = [
        Proposal(id=pid, title=pid, creation_date="2024-01-01T00:00:00Z")
        for pid in ("propX", "propY", "propEmpty")
    ]
    validators = [
        Validator(id="A", name="A", total_stake=100),
        Validator(id="B", name="B", total_stake=200),
        Validator(id="V", name="V", total_stake=1000),
    ]
    votes = [
        ValidatorVote(proposal_id="propX", validator_id="A", vote="Yes"),
        ValidatorVote(proposal_id="propX", validator_id="B", vote="No"),
    ]
    delegators = [
        Delegator(id="D", name="D", stake_amount=500, delegated_to_validator_id="V"),
        Delegator(id="E", name="E", stake_amount=50, delegated_to_validator_id="V"),
    ]
    return EntityStore(proposals, validators, votes, delegators)

# demo data the process starts with
import logging
from pathlib import Path
from typing import Optional, Union
from pydantic import ValidationError
from .errors import InvalidArgumentError
from .models import SeedData, VoteOption
from .store import EntityStore

log = logging.getLogger(__name__)

YES, NO, ABSTAIN = VoteOption.YES, VoteOption.NO, VoteOption.ABSTAIN

DEMO_PROPOSALS = [
    {
        "id": "prop1",
        "title": "Upgrade Network Protocol to v1.5",
        "description": "Upgrade the network protocol to version 1.5, introducing "
        "new features for scalability and security, including improved "
        "transaction processing and reduced latency.",
        "status": "Active",
        "creation_date": "2024-07-01T10:00:00Z",
    },
    {
        "id": "prop2",
        "title": "Allocate Treasury Funds for Ecosystem Grants",
        "description": "Allocate 5 million SOL from the treasury for grants to "
        "projects in DeFi, NFTs and infrastructure.",
        "status": "Active",
        "creation_date": "2024-07-15T14:30:00Z",
    },
    {
        "id": "prop3",
        "title": "Implement New Staking Reward Mechanism",
        "description": "Revise staking rewards to favour long-term stakers, "
        "adjusting inflation rates and reward distribution.",
        "status": "Closed",
        "creation_date": "2024-06-01T09:00:00Z",
    },
]

DEMO_VALIDATORS = [
    {"id": "val1", "name": "Certus One", "total_stake": 1_500_000},
    {"id": "val2", "name": "Chorus One", "total_stake": 1_200_000},
    {"id": "val3", "name": "Everstake", "total_stake": 1_800_000},
    {"id": "val4", "name": "Figment", "total_stake": 900_000},
    {"id": "val5", "name": "P2P.org", "total_stake": 2_000_000},
]
for _v in DEMO_VALIDATORS:
    _v["avatar_url"] = f"https://picsum.photos/seed/{_v['id']}/40/40"

_DEMO_BALLOTS = {
    "prop1": [YES, YES, NO, YES, ABSTAIN],
    "prop2": [NO, YES, YES, ABSTAIN, YES],
    "prop3": [YES, YES, YES, NO, YES],
}
DEMO_VALIDATOR_VOTES = [
    {"proposal_id": pid, "validator_id": f"val{i}", "vote": vote}
    for pid, ballot in _DEMO_BALLOTS.items()
    for i, vote in enumerate(ballot, start=1)
]

DEMO_DELEGATORS = [
    {
        "id": "delegator1_wallet_address_xxxxxxxxxxxx",
        "name": "Alice (High Stake)",
        "stake_amount": 100_000,
        "delegated_to_validator_id": "val1",
    },
    {
        "id": "delegator2_wallet_address_yyyyyyyyyyyy",
        "name": "Bob (Med Stake)",
        "stake_amount": 50_000,
        "delegated_to_validator_id": "val1",
    },
    {
        "id": "delegator3_wallet_address_zzzzzzzzzzzz",
        "name": "Carol (Low Stake)",
        "stake_amount": 10_000,
        "delegated_to_validator_id": "val2",
    },
    {
        "id": "delegator4_wallet_address_wwwwwwwwwwww",
        "name": "Dave (High Stake)",
        "stake_amount": 120_000,
        "delegated_to_validator_id": "val3",
    },
    {
        "id": "delegator5_wallet_address_vvvvvvvvvvvv",
        "name": "Eve (Med Stake)",
        "stake_amount": 60_000,
        "delegated_to_validator_id": "val3",
    },
]

DEMO_SUGGESTIONS = [
    {
        "proposal_id": "prop1",
        "delegator_id": "delegator1_wallet_address_xxxxxxxxxxxx",
        "validator_id": "val1",
        "vote": YES,
        "stake_weight": 100_000,
    },
    {
        "proposal_id": "prop1",
        "delegator_id": "delegator2_wallet_address_yyyyyyyyyyyy",
        "validator_id": "val1",
        "vote": NO,
        "stake_weight": 50_000,
    },
]


def store_from_seed(seed: SeedData) -> EntityStore:
    return EntityStore(
        proposals=seed.proposals,
        validators=seed.validators,
        validator_votes=seed.validator_votes,
        delegators=seed.delegators,
        suggestions=seed.suggestions,
    )


def default_store() -> EntityStore:
    """
    Fresh store holding the built-in demo data.
    """
    seed = SeedData(
        proposals=DEMO_PROPOSALS,
        validators=DEMO_VALIDATORS,
        validator_votes=DEMO_VALIDATOR_VOTES,
        delegators=DEMO_DELEGATORS,
        suggestions=DEMO_SUGGESTIONS,
    )
    return store_from_seed(seed)


def load_seed(path: Union[str, Path]) -> EntityStore:
    """
    Build a store from a JSON file shaped like SeedData.
    """
    raw = Path(path).read_text(encoding="utf-8")
    try:
        seed = SeedData.model_validate_json(raw)
    except ValidationError as e:
        raise InvalidArgumentError(f"invalid seed file {path}: {e}") from e
    log.info(
        "loaded seed %s: %d proposals, %d validators, %d delegators",
        path,
        len(seed.proposals),
        len(seed.validators),
        len(seed.delegators),
    )
    return store_from_seed(seed)


def build_store(seed_path: Optional[str] = None) -> EntityStore:
    if seed_path:
        return load_seed(seed_path)
    return default_store()

# env vars + constants
import os

APP_TITLE = os.getenv("STAKEVIEW_TITLE", "Stake Consensus Viewer")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "info").lower()

# Delegator returned by the simulated wallet connect
DEMO_DELEGATOR_ID = os.getenv(
    "DEMO_DELEGATOR_ID", "delegator1_wallet_address_xxxxxxxxxxxx"
)

# Optional JSON seed file; the built-in demo data is used when unset
SEED_PATH = os.getenv("SEED_PATH") or None

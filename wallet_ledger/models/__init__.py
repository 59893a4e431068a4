from wallet_ledger.models.account import Account
from wallet_ledger.models.profile import Profile
from wallet_ledger.models.wallet import Wallet
from wallet_ledger.models.internal_account import InternalAccount
from wallet_ledger.models.participant import (
    Participant,
    PARTICIPANT_WALLET,
    PARTICIPANT_INTERNAL,
    PARTICIPANT_TYPES,
)
from wallet_ledger.models.transaction import Transaction

__all__ = [
    "Account",
    "Profile",
    "Wallet",
    "InternalAccount",
    "Participant",
    "PARTICIPANT_WALLET",
    "PARTICIPANT_INTERNAL",
    "PARTICIPANT_TYPES",
    "Transaction",
]

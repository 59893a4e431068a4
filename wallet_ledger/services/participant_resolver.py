import logging
from dataclasses import dataclass
from typing import Optional

from wallet_ledger.models import (
    InternalAccount,
    Participant,
    Profile,
    Wallet,
    PARTICIPANT_INTERNAL,
    PARTICIPANT_WALLET,
)
from wallet_ledger.utils.exceptions import IntegrityViolation, NotFound
from wallet_ledger.utils.storage import storage_errors

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    name: Optional[str]
    avatar: Optional[str]
    # None for internal accounts: they have no phone, and that is not an error
    phone: Optional[str] = None


@dataclass(frozen=True)
class ResolvedParticipant:
    participant_id: str
    type: str
    identity: Identity


def _load_wallet_identities(session, ref_ids):
    rows = (
        session.query(Wallet.id, Profile.full_name, Profile.avatar, Profile.phone)
        .join(Profile, Profile.id == Wallet.account_id)
        .filter(Wallet.id.in_(ref_ids))
        .all()
    )
    return {
        wallet_id: Identity(name=full_name, avatar=avatar, phone=phone)
        for wallet_id, full_name, avatar, phone in rows
    }


def _load_internal_identities(session, ref_ids):
    rows = (
        session.query(InternalAccount.id, InternalAccount.name, InternalAccount.avatar)
        .filter(InternalAccount.id.in_(ref_ids))
        .all()
    )
    return {
        internal_id: Identity(name=name, avatar=avatar, phone=None)
        for internal_id, name, avatar in rows
    }


# the only place that branches on participant type
IDENTITY_LOADERS = {
    PARTICIPANT_WALLET: _load_wallet_identities,
    PARTICIPANT_INTERNAL: _load_internal_identities,
}


class ParticipantResolver:
    """
    Maps participants to display identities.

    Lookups are batched: one query for the participant rows, then one query
    per participant kind, however many ids are asked for.
    """

    def __init__(self, session):
        self.session = session

    def resolve(self, participant):
        """Resolve a Participant row (or a participant id) to its Identity."""
        if isinstance(participant, Participant):
            with storage_errors(self.session):
                resolved = self._resolve_rows([participant])
            return resolved[participant.id].identity

        return self.resolve_many([participant])[participant].identity

    def resolve_many(self, participant_ids):
        """Return ``{participant_id: ResolvedParticipant}`` for every id given."""
        wanted = set(participant_ids)
        if not wanted:
            return {}

        with storage_errors(self.session):
            rows = (
                self.session.query(Participant)
                .filter(Participant.id.in_(wanted))
                .all()
            )
            missing = wanted - {p.id for p in rows}
            if missing:
                raise NotFound(
                    "Participant not found",
                    details={"participant_ids": sorted(missing)},
                )
            return self._resolve_rows(rows)

    def _resolve_rows(self, participants):
        by_type = {}
        for p in participants:
            by_type.setdefault(p.type, []).append(p)

        resolved = {}
        for kind, group in by_type.items():
            loader = IDENTITY_LOADERS.get(kind)
            if loader is None:
                logger.error("Participant(s) %s have unknown type %r", [p.id for p in group], kind)
                raise IntegrityViolation(
                    f"Unknown participant type: {kind}",
                    details={"participant_ids": sorted(p.id for p in group)},
                )

            identities = loader(self.session, {p.ref_id for p in group})
            dangling = [p for p in group if p.ref_id not in identities]
            if dangling:
                logger.error(
                    "Dangling %s participant(s): %s",
                    kind,
                    ", ".join(f"{p.id}->{p.ref_id}" for p in dangling),
                )
                raise IntegrityViolation(
                    details={
                        "type": kind,
                        "participant_ids": sorted(p.id for p in dangling),
                    }
                )

            for p in group:
                resolved[p.id] = ResolvedParticipant(
                    participant_id=p.id,
                    type=kind,
                    identity=identities[p.ref_id],
                )
        return resolved

    def find_dangling(self):
        """Participants whose ref_id addresses nothing resolvable."""
        with storage_errors(self.session):
            wallet_side = (
                self.session.query(Participant)
                .outerjoin(Wallet, Wallet.id == Participant.ref_id)
                .outerjoin(Profile, Profile.id == Wallet.account_id)
                .filter(Participant.type == PARTICIPANT_WALLET, Profile.id.is_(None))
                .all()
            )
            internal_side = (
                self.session.query(Participant)
                .outerjoin(InternalAccount, InternalAccount.id == Participant.ref_id)
                .filter(Participant.type == PARTICIPANT_INTERNAL, InternalAccount.id.is_(None))
                .all()
            )
        return sorted(wallet_side + internal_side, key=lambda p: p.id)

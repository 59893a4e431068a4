import pytest
from sqlalchemy import event

from wallet_ledger.extensions import db
from wallet_ledger.models import Participant, PARTICIPANT_INTERNAL, PARTICIPANT_WALLET
from wallet_ledger.services.participant_resolver import Identity, ParticipantResolver
from wallet_ledger.utils.exceptions import IntegrityViolation, NotFound


@pytest.fixture
def resolver(app):
    return ParticipantResolver(db.session)


def test_wallet_participant_resolves_through_profile(ledger, resolver):
    _, alice = ledger.account("Alice", phone="+62811", avatar="alice.png")

    assert resolver.resolve(alice) == Identity(name="Alice", avatar="alice.png", phone="+62811")


def test_internal_participant_has_no_phone(ledger, resolver):
    _, merchant = ledger.internal("Top-up Merchant", avatar="merchant.png")

    identity = resolver.resolve(merchant)
    assert identity.name == "Top-up Merchant"
    assert identity.avatar == "merchant.png"
    assert identity.phone is None


def test_resolve_accepts_loaded_participant(ledger, resolver):
    _, alice = ledger.account("Alice")
    participant = db.session.get(Participant, alice)

    assert resolver.resolve(participant).name == "Alice"


def test_resolve_many_is_batched_per_type(app, ledger, resolver):
    _, alice = ledger.account("Alice")
    _, bob = ledger.account("Bob")
    _, merchant = ledger.internal("Merchant")
    db.session.expire_all()

    statements = []

    def count(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement)

    event.listen(db.engine, "before_cursor_execute", count)
    try:
        resolved = resolver.resolve_many([alice, bob, merchant, alice])
    finally:
        event.remove(db.engine, "before_cursor_execute", count)

    # participants, wallets, internal accounts
    assert len(statements) == 3
    assert {r.type for r in resolved.values()} == {PARTICIPANT_WALLET, PARTICIPANT_INTERNAL}
    assert resolved[bob].identity.name == "Bob"
    assert resolved[merchant].identity.phone is None


def test_resolve_many_empty(resolver):
    assert resolver.resolve_many([]) == {}


def test_unknown_participant_id_is_not_found(resolver):
    with pytest.raises(NotFound) as exc:
        resolver.resolve("prt-nope")

    assert not isinstance(exc.value, IntegrityViolation)
    assert exc.value.details["participant_ids"] == ["prt-nope"]


@pytest.mark.parametrize("kind", [PARTICIPANT_WALLET, PARTICIPANT_INTERNAL])
def test_dangling_participant_is_integrity_violation(ledger, resolver, kind):
    broken = ledger.dangling(kind)

    with pytest.raises(IntegrityViolation) as exc:
        resolver.resolve(broken)

    assert isinstance(exc.value, NotFound)
    assert exc.value.code == "INTEGRITY_VIOLATION"
    assert exc.value.details == {"type": kind, "participant_ids": [broken]}


def test_one_dangling_participant_fails_the_batch(ledger, resolver):
    _, alice = ledger.account("Alice")
    broken = ledger.dangling(PARTICIPANT_WALLET)

    with pytest.raises(IntegrityViolation):
        resolver.resolve_many([alice, broken])


def test_find_dangling(ledger, resolver):
    ledger.account("Alice")
    ledger.internal("Merchant")
    wallet_gap = ledger.dangling(PARTICIPANT_WALLET)
    internal_gap = ledger.dangling(PARTICIPANT_INTERNAL, ref_id="int-gone")

    found = resolver.find_dangling()

    assert [p.id for p in found] == sorted([wallet_gap, internal_gap])


def test_participant_type_is_fixed(ledger):
    _, alice = ledger.account("Alice")
    participant = db.session.get(Participant, alice)

    with pytest.raises(ValueError):
        participant.type = PARTICIPANT_INTERNAL


def test_participant_type_must_be_known():
    with pytest.raises(ValueError):
        Participant(type="bank", ref_id="x")

import click
from flask.cli import AppGroup

from wallet_ledger.extensions import db
from wallet_ledger.services.participant_resolver import ParticipantResolver

ledger_cli = AppGroup("ledger", help="Ledger maintenance commands.")


@ledger_cli.command("check-participants")
def check_participants():
    """List participants whose wallet or internal account no longer exists."""
    dangling = ParticipantResolver(db.session).find_dangling()

    if not dangling:
        click.echo("All participants resolve.")
        return

    for p in dangling:
        click.echo(f"{p.id}\t{p.type}\t{p.ref_id}")
    click.echo(f"{len(dangling)} dangling participant(s) found.", err=True)
    raise SystemExit(1)

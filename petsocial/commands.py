# petsocial/commands.py
import click
from flask import current_app
from flask.cli import with_appcontext


@click.command('grant-permission')
@click.argument('login')
@click.argument('permission')
@with_appcontext
def grant_permission_command(login, permission):
    """Grants PERMISSION to the user registered as LOGIN (e.g. the first admin)."""
    user_service = current_app.services['users']
    user = user_service.find_by_login(login)
    if not user:
        raise click.ClickException(f"No user registered as '{login}'")
    user_service.grant(user.user_id, [permission])
    click.echo(f"Granted '{permission}' to {login} ({user.user_id})")


def register_commands(app):
    app.cli.add_command(grant_permission_command)

import click
from donorlink import db
from donorlink.models.user import User, UserRole, ROLES


def _get_user(email):
    user = User.query.filter_by(email=email).first()
    if user is None:
        raise click.ClickException(f"User not found: {email}")
    return user


def register_commands(app):
    @app.cli.command('init-db')
    def init_db():
        """Create all database tables."""
        db.create_all()
        click.echo("Database tables created")

    @app.cli.command('grant-role')
    @click.argument('email')
    @click.option('--role', type=click.Choice(ROLES), default='admin', show_default=True)
    def grant_role(email, role):
        """Give an account a role (roles have no web UI)."""
        user = _get_user(email)
        if UserRole.query.filter_by(user_id=user.id, role=role).first():
            click.echo(f"{email} already has role '{role}'")
            return
        db.session.add(UserRole(user_id=user.id, role=role))
        db.session.commit()
        app.logger.info(f"Granted role '{role}' to account {user.id}")
        click.echo(f"Granted '{role}' to {email}")

    @app.cli.command('revoke-role')
    @click.argument('email')
    @click.option('--role', type=click.Choice(ROLES), default='admin', show_default=True)
    def revoke_role(email, role):
        """Remove a role from an account."""
        user = _get_user(email)
        row = UserRole.query.filter_by(user_id=user.id, role=role).first()
        if row is None:
            click.echo(f"{email} does not have role '{role}'")
            return
        db.session.delete(row)
        db.session.commit()
        app.logger.info(f"Revoked role '{role}' from account {user.id}")
        click.echo(f"Revoked '{role}' from {email}")

from functools import wraps
from flask import g, flash, redirect, url_for, current_app
from flask_login import current_user, login_user, logout_user
from donorlink.models.user import has_role


class AuthContext:
    """
    The signed-in account for the current request, or nobody.

    Built once per request and handed to views decorated with
    ``with_auth_context``. Admin status is read from the role table on
    demand and cached for the rest of the request.
    """

    def __init__(self, user=None):
        self.user = user
        self._is_admin = None

    @property
    def identity(self):
        return self.user.id if self.user is not None else None

    @property
    def is_authenticated(self):
        return self.user is not None

    def is_admin(self):
        if self._is_admin is None:
            self._is_admin = has_role(self.identity, 'admin')
        return self._is_admin

    def __repr__(self):
        return f"AuthContext({self.identity!r})"


def refresh_auth_context():
    """Rebuild the context from the Flask-Login session."""
    user = current_user._get_current_object() if current_user.is_authenticated else None
    g.auth = AuthContext(user)
    return g.auth


def get_auth_context():
    if 'auth' not in g:
        return refresh_auth_context()
    return g.auth


def sign_in(user, remember=False):
    login_user(user, remember=remember)
    current_app.logger.info(f"Account {user.id} signed in")
    return refresh_auth_context()


def sign_out():
    ctx = get_auth_context()
    if ctx.is_authenticated:
        current_app.logger.info(f"Account {ctx.identity} signed out")
    logout_user()
    g.auth = AuthContext()
    return g.auth


def init_auth_context(app):
    @app.before_request
    def load_auth_context():
        refresh_auth_context()

    @app.context_processor
    def inject_auth_context():
        return {'auth': get_auth_context()}


def with_auth_context(f):
    """Require a signed-in account and pass its AuthContext as the first argument."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        ctx = get_auth_context()
        if not ctx.is_authenticated:
            # Flashes login_message and redirects to login_view
            return current_app.login_manager.unauthorized()
        return f(ctx, *args, **kwargs)
    return decorated_function


# Role table lookup on every admin request; the database is the only authority
def admin_required(f):
    @wraps(f)
    def decorated_function(ctx, *args, **kwargs):
        if not ctx.is_admin():
            current_app.logger.warning(f"Account {ctx.identity} denied admin access")
            flash("Access Denied: You don't have admin privileges", 'danger')
            return redirect(url_for('main.home'))
        return f(ctx, *args, **kwargs)
    return decorated_function

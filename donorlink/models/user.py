from donorlink import db, login_manager
from flask_login import UserMixin
from datetime import datetime

ROLES = ('admin', 'user')

@login_manager.user_loader
def load_user(user_id):
    return db.session.get(User, int(user_id))

class User(db.Model, UserMixin):
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(120), unique=True, nullable=False)
    password = db.Column(db.String(60), nullable=False)
    full_name = db.Column(db.String(100), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # Relationships
    donor_profile = db.relationship('Donor', backref='user', uselist=False)
    roles = db.relationship('UserRole', backref='user', lazy=True, cascade='all, delete-orphan')

    def __repr__(self):
        return f"User('{self.email}')"


class UserRole(db.Model):
    """Role tag for an account. Rows are granted out-of-band via the CLI."""
    __tablename__ = 'user_roles'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    role = db.Column(db.String(20), nullable=False)  # admin, user
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    __table_args__ = (db.UniqueConstraint('user_id', 'role', name='unique_user_role'),)

    def __repr__(self):
        return f"UserRole('{self.user_id}', '{self.role}')"


def has_role(user_id, role):
    """
    Check whether a role row exists for the given account
    """
    if user_id is None:
        return False
    row = UserRole.query.filter_by(user_id=user_id, role=role).first()
    return row is not None

from donorlink import db
from datetime import datetime
from sqlalchemy import or_

BLOOD_GROUPS = ['A+', 'A-', 'B+', 'B-', 'AB+', 'AB-', 'O+', 'O-']

class Donor(db.Model):
    __tablename__ = 'donors'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), unique=True, nullable=False)
    full_name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(120), nullable=False)
    phone = db.Column(db.String(20), nullable=False)
    blood_group = db.Column(db.String(5), nullable=False)
    age = db.Column(db.Integer, nullable=False)
    gender = db.Column(db.String(10), nullable=False)
    date_of_birth = db.Column(db.Date, nullable=False)
    address = db.Column(db.String(200), nullable=False)
    city = db.Column(db.String(100), nullable=False)
    state = db.Column(db.String(100), nullable=False)
    pincode = db.Column(db.String(10), nullable=False)
    available_to_donate = db.Column(db.Boolean, nullable=False, default=True)
    last_donation_date = db.Column(db.Date, nullable=True)
    medical_conditions = db.Column(db.Text, nullable=True)
    emergency_contact_name = db.Column(db.String(100), nullable=True)
    emergency_contact_phone = db.Column(db.String(20), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    @classmethod
    def for_user(cls, user_id):
        # At most one profile per account
        return cls.query.filter_by(user_id=user_id).one_or_none()

    @classmethod
    def search(cls, blood_group=None, location=None):
        """
        Build a donor query from the admin search criteria.

        Args:
            blood_group: exact blood group to match; empty or 'all' skips the filter
            location: substring matched case-insensitively against city or state

        Returns:
            An unordered query; callers paginate or count it.
        """
        query = cls.query

        if blood_group and blood_group != 'all':
            query = query.filter(cls.blood_group == blood_group)

        location = (location or '').strip()
        if location:
            # % and _ typed by the user are matched literally
            query = query.filter(or_(
                cls.city.icontains(location, autoescape=True),
                cls.state.icontains(location, autoescape=True)
            ))

        return query

    @classmethod
    def matching_request(cls, blood_group, city):
        return cls.query.filter_by(
            blood_group=blood_group,
            city=city,
            available_to_donate=True
        )

    def __repr__(self):
        return f"Donor('{self.full_name}', '{self.blood_group}')"

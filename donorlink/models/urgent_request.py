from donorlink import db
from datetime import datetime

URGENCY_LEVELS = [
    ('critical', 'Critical (Immediate)'),
    ('high', 'High (Within 24hrs)'),
    ('medium', 'Medium (Within 48hrs)'),
]

class UrgentRequest(db.Model):
    __tablename__ = 'urgent_blood_requests'

    id = db.Column(db.Integer, primary_key=True)
    blood_group = db.Column(db.String(5), nullable=False)
    units_needed = db.Column(db.Integer, nullable=False, default=1)
    hospital_name = db.Column(db.String(200), nullable=False)
    city = db.Column(db.String(100), nullable=False)
    state = db.Column(db.String(100), nullable=True)
    contact_number = db.Column(db.String(20), nullable=False)
    patient_name = db.Column(db.String(100), nullable=True)
    urgency_level = db.Column(db.String(20), nullable=False, default='high')  # critical, high, medium
    additional_notes = db.Column(db.Text, nullable=True)
    status = db.Column(db.String(20), nullable=False, default='active')  # active, fulfilled
    created_by = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    fulfilled_at = db.Column(db.DateTime, nullable=True)

    def __repr__(self):
        return f"UrgentRequest('{self.blood_group}', '{self.hospital_name}', '{self.status}')"

    @property
    def is_active(self):
        return self.status == 'active'

    def mark_fulfilled(self):
        self.status = 'fulfilled'
        self.fulfilled_at = datetime.utcnow()

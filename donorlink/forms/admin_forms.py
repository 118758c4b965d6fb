from flask_wtf import FlaskForm
from wtforms import StringField, IntegerField, SelectField, TextAreaField, SubmitField
from wtforms.validators import Length, NumberRange, Optional
from donorlink.models.donor import BLOOD_GROUPS
from donorlink.models.urgent_request import URGENCY_LEVELS

class DonorSearchForm(FlaskForm):
    # Submitted over GET so results can be paged and bookmarked
    class Meta:
        csrf = False

    blood_group = SelectField('Blood Group',
                              choices=[('all', 'All Groups')] + [(bg, bg) for bg in BLOOD_GROUPS],
                              default='all')
    location = StringField('Location (City/State)', validators=[Optional(), Length(max=100)])


class UrgentRequestForm(FlaskForm):
    # Required fields are checked by broadcast_urgent_request
    patient_name = StringField('Patient Name', validators=[Optional(), Length(max=100)])
    blood_group = SelectField('Blood Group *', choices=[('', 'Select blood group')] + [(bg, bg) for bg in BLOOD_GROUPS])
    units_needed = IntegerField('Units Needed *', validators=[Optional(), NumberRange(min=1, max=50)], default=1)
    urgency_level = SelectField('Urgency Level *', choices=URGENCY_LEVELS, default='high')
    hospital_name = StringField('Hospital Name *', validators=[Length(max=200)])
    city = StringField('City *', validators=[Length(max=100)])
    state = StringField('State', validators=[Length(max=100)])
    contact_number = StringField('Contact Number *', validators=[Length(max=20)])
    additional_notes = TextAreaField('Additional Notes', validators=[Optional(), Length(max=500)])
    submit = SubmitField('Send Urgent Request & Notify Donors')


class FulfillRequestForm(FlaskForm):
    submit = SubmitField('Mark Fulfilled')

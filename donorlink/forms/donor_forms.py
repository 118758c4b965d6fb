from flask_wtf import FlaskForm
from wtforms import StringField, IntegerField, TextAreaField, SubmitField, SelectField, DateField, BooleanField
from wtforms.validators import DataRequired, Length, NumberRange, Email, Optional, ValidationError
from datetime import date
from donorlink.models.donor import BLOOD_GROUPS
from donorlink.utils.dates import age_from_dob

GENDER_CHOICES = [('male', 'Male'), ('female', 'Female'), ('other', 'Other')]
BLOOD_GROUP_CHOICES = [(bg, bg) for bg in BLOOD_GROUPS]

class DonorRegistrationForm(FlaskForm):
    full_name = StringField('Full Name', validators=[DataRequired(), Length(min=2, max=100)])
    email = StringField('Email', validators=[DataRequired(), Email()])
    phone = StringField('Phone Number', validators=[DataRequired(), Length(min=7, max=20)])
    blood_group = SelectField('Blood Group', choices=BLOOD_GROUP_CHOICES, validators=[DataRequired()])
    date_of_birth = DateField('Date of Birth', validators=[DataRequired()])
    age = IntegerField('Age', validators=[DataRequired(), NumberRange(min=16, max=100)])
    gender = SelectField('Gender', choices=GENDER_CHOICES, validators=[DataRequired()])
    last_donation_date = DateField('Last Donation Date', validators=[Optional()])
    address = StringField('Address', validators=[DataRequired(), Length(max=200)])
    city = StringField('City', validators=[DataRequired(), Length(max=100)])
    state = StringField('State', validators=[DataRequired(), Length(max=100)])
    pincode = StringField('Pincode', validators=[DataRequired(), Length(min=4, max=10)])
    medical_conditions = TextAreaField('Medical Conditions', validators=[Optional(), Length(max=500)])
    emergency_contact_name = StringField('Emergency Contact Name', validators=[Optional(), Length(max=100)])
    emergency_contact_phone = StringField('Emergency Contact Phone', validators=[Optional(), Length(max=20)])
    submit = SubmitField('Register as Donor')

    def validate_date_of_birth(self, date_of_birth):
        if date_of_birth.data and date_of_birth.data > date.today():
            raise ValidationError('Date of birth cannot be in the future')

    def validate_last_donation_date(self, last_donation_date):
        if last_donation_date.data and last_donation_date.data > date.today():
            raise ValidationError('Last donation date cannot be in the future')

    def validate_age(self, age):
        # Allow one year of slack around birthdays
        computed = age_from_dob(self.date_of_birth.data)
        if computed is not None and age.data is not None and abs(computed - age.data) > 1:
            raise ValidationError('Age does not match date of birth')

    def validate_pincode(self, pincode):
        if not pincode.data.isdigit():
            raise ValidationError('Pincode must contain only numbers')


class UpdateProfileForm(FlaskForm):
    full_name = StringField('Full Name', validators=[DataRequired(), Length(min=2, max=100)])
    phone = StringField('Phone Number', validators=[DataRequired(), Length(min=7, max=20)])
    age = IntegerField('Age', validators=[DataRequired(), NumberRange(min=16, max=100)])
    gender = SelectField('Gender', choices=GENDER_CHOICES, validators=[DataRequired()])
    city = StringField('City', validators=[DataRequired(), Length(max=100)])
    state = StringField('State', validators=[DataRequired(), Length(max=100)])
    available_to_donate = BooleanField('Available to donate')
    submit = SubmitField('Save')

from flask import Blueprint, render_template, redirect, url_for, flash, request, current_app
from sqlalchemy.exc import SQLAlchemyError
from donorlink import db
from donorlink.models.donor import Donor
from donorlink.forms.donor_forms import DonorRegistrationForm, UpdateProfileForm
from donorlink.utils.auth_context import with_auth_context
from donorlink.utils.achievements import derive_badges
from donorlink.utils.compatibility import SELECTOR_ORDER, compatibility, format_types

donor = Blueprint('donor', __name__)

PROFILE_FIELDS = ('full_name', 'phone', 'age', 'gender', 'city', 'state', 'available_to_donate')


def _profile_or_redirect(ctx, message=None):
    """Return (donor, None) or (None, redirect response) when no profile exists yet."""
    donor_profile = Donor.for_user(ctx.identity)
    if donor_profile is None:
        if message:
            flash(message, 'info')
        return None, redirect(url_for('donor.register'))
    return donor_profile, None


@donor.route('/register', methods=['GET', 'POST'])
@with_auth_context
def register(ctx):
    if Donor.for_user(ctx.identity) is not None:
        flash('You are already registered as a donor.', 'info')
        return redirect(url_for('donor.dashboard'))

    form = DonorRegistrationForm()
    if request.method == 'GET':
        form.full_name.data = ctx.user.full_name
        form.email.data = ctx.user.email

    if form.validate_on_submit():
        donor_profile = Donor(
            user_id=ctx.identity,
            full_name=form.full_name.data,
            email=form.email.data,
            phone=form.phone.data,
            blood_group=form.blood_group.data,
            date_of_birth=form.date_of_birth.data,
            age=form.age.data,
            gender=form.gender.data,
            address=form.address.data,
            city=form.city.data,
            state=form.state.data,
            pincode=form.pincode.data,
            last_donation_date=form.last_donation_date.data,
            medical_conditions=form.medical_conditions.data or None,
            emergency_contact_name=form.emergency_contact_name.data or None,
            emergency_contact_phone=form.emergency_contact_phone.data or None,
            available_to_donate=True
        )
        try:
            db.session.add(donor_profile)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f"Error registering donor for account {ctx.identity}: {str(e)}")
            flash(f'Error: {str(e)}', 'danger')
            return render_template('donor/register.html', title='Donor Registration', form=form)

        current_app.logger.info(f"Donor profile {donor_profile.id} created for account {ctx.identity}")
        flash('Registration Successful! Your donor profile has been created.', 'success')
        return redirect(url_for('donor.dashboard'))

    return render_template('donor/register.html', title='Donor Registration', form=form)


@donor.route('/dashboard')
@with_auth_context
def dashboard(ctx):
    donor_profile, response = _profile_or_redirect(ctx)
    if response:
        return response

    return render_template('donor/dashboard.html',
                          title='Donor Dashboard',
                          donor=donor_profile)


@donor.route('/achievements')
@with_auth_context
def achievements(ctx):
    donor_profile, response = _profile_or_redirect(
        ctx, 'Please register as a donor to see achievements')
    if response:
        return response

    return render_template('donor/achievements.html',
                          title='Achievements',
                          donor=donor_profile,
                          badges=derive_badges(donor_profile))


@donor.route('/profile', methods=['GET', 'POST'])
@with_auth_context
def profile(ctx):
    donor_profile, response = _profile_or_redirect(ctx, 'Please register as a donor')
    if response:
        return response

    form = UpdateProfileForm()
    editing = request.args.get('edit') == '1' or request.method == 'POST'

    if form.validate_on_submit():
        for field in PROFILE_FIELDS:
            setattr(donor_profile, field, getattr(form, field).data)
        try:
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f"Error updating donor {donor_profile.id}: {str(e)}")
            flash(f'Save failed: {str(e)}', 'danger')
        else:
            flash('Saved', 'success')
            return redirect(url_for('donor.profile'))
    elif request.method == 'GET':
        # Populate form with current data
        for field in PROFILE_FIELDS:
            getattr(form, field).data = getattr(donor_profile, field)

    selected = request.args.get('blood_type', donor_profile.blood_group)
    donors, recipients = compatibility(selected)

    return render_template('donor/profile.html',
                          title='Profile',
                          form=form,
                          donor=donor_profile,
                          editing=editing,
                          blood_types=SELECTOR_ORDER,
                          selected_blood_type=selected,
                          compatible_donors=format_types(donors),
                          compatible_recipients=format_types(recipients))

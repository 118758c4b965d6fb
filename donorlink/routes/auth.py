from flask import Blueprint, render_template, redirect, url_for, flash, current_app
from sqlalchemy.exc import SQLAlchemyError
from donorlink import db, bcrypt
from donorlink.models.user import User
from donorlink.models.donor import Donor
from donorlink.forms.auth_forms import LoginForm, SignupForm
from donorlink.utils.auth_context import get_auth_context, sign_in, sign_out

auth = Blueprint('auth', __name__)

@auth.route('/signup', methods=['GET', 'POST'])
def signup():
    if get_auth_context().is_authenticated:
        return redirect(url_for('main.home'))

    form = SignupForm()
    if form.validate_on_submit():
        hashed_password = bcrypt.generate_password_hash(form.password.data).decode('utf-8')
        user = User(email=form.email.data, password=hashed_password, full_name=form.full_name.data)
        try:
            db.session.add(user)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f"Error creating account for {form.email.data}: {str(e)}")
            flash(f'Error: {str(e)}', 'danger')
            return render_template('auth/signup.html', title='Create Account', form=form)

        flash('Account created! Sign in to complete donor registration.', 'success')
        return redirect(url_for('auth.login'))

    return render_template('auth/signup.html', title='Create Account', form=form)


@auth.route('/login', methods=['GET', 'POST'])
def login():
    if get_auth_context().is_authenticated:
        return redirect(url_for('main.home'))

    form = LoginForm()
    if form.validate_on_submit():
        user = User.query.filter_by(email=form.email.data).first()
        if not user or not bcrypt.check_password_hash(user.password, form.password.data):
            flash('Login unsuccessful. Please check email and password.', 'danger')
            return render_template('auth/login.html', title='Login', form=form)

        ctx = sign_in(user, remember=form.remember.data)

        if form.login_as.data == 'admin':
            if not ctx.is_admin():
                sign_out()
                flash('Not authorized as admin', 'danger')
                return render_template('auth/login.html', title='Login', form=form)
            return redirect(url_for('admin.dashboard'))

        # Missing profile is the normal first-login path
        if Donor.for_user(ctx.identity) is None:
            return redirect(url_for('donor.register'))
        return redirect(url_for('donor.dashboard'))

    return render_template('auth/login.html', title='Login', form=form)


@auth.route('/logout')
def logout():
    sign_out()
    return redirect(url_for('auth.login'))

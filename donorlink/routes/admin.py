from flask import Blueprint, render_template, redirect, url_for, flash, request, current_app
from sqlalchemy.exc import SQLAlchemyError
from donorlink import db
from donorlink.models.donor import Donor
from donorlink.models.urgent_request import UrgentRequest
from donorlink.forms.admin_forms import DonorSearchForm, UrgentRequestForm, FulfillRequestForm
from donorlink.utils.auth_context import with_auth_context, admin_required
from donorlink.utils.notifications import broadcast_urgent_request, MissingFieldsError

admin = Blueprint('admin', __name__)


def donor_stats():
    total = Donor.query.count()
    active = Donor.query.filter_by(available_to_donate=True).count()
    percent = round(active / total * 100) if total else 0
    return {'total': total, 'active': active, 'active_percent': percent}


@admin.route('/dashboard')
@with_auth_context
@admin_required
def dashboard(ctx):
    search_form = DonorSearchForm(request.args)
    searched = 'blood_group' in request.args or 'location' in request.args
    donors = None

    if searched and not search_form.validate():
        for field, errors in search_form.errors.items():
            for error in errors:
                flash(f'{getattr(search_form, field).label.text}: {error}', 'danger')
    elif searched:
        page = request.args.get('page', 1, type=int)
        try:
            donors = Donor.search(
                blood_group=search_form.blood_group.data,
                location=search_form.location.data
            ).paginate(page=page, per_page=current_app.config['DONOR_SEARCH_PER_PAGE'], error_out=False)
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error(f"Donor search failed: {str(e)}")
            flash(f'Error: {str(e)}', 'danger')
        else:
            if page == 1:
                flash(f'Search Complete: Found {donors.total} donor(s)', 'info')

    try:
        stats = donor_stats()
        active_requests = UrgentRequest.query.filter_by(status='active').order_by(UrgentRequest.created_at.desc()).all()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error loading admin dashboard: {str(e)}")
        flash(f'Error: {str(e)}', 'danger')
        stats = {'total': 0, 'active': 0, 'active_percent': 0}
        active_requests = []

    return render_template('admin/dashboard.html',
                          title='Admin Dashboard',
                          stats=stats,
                          search_form=search_form,
                          donors=donors,
                          search_args={k: v for k, v in request.args.items() if k != 'page'},
                          urgent_form=UrgentRequestForm(),
                          fulfill_form=FulfillRequestForm(),
                          active_requests=active_requests)


@admin.route('/donors/<int:donor_id>')
@with_auth_context
@admin_required
def donor_detail(ctx, donor_id):
    donor_profile = db.get_or_404(Donor, donor_id)
    return render_template('admin/donor_detail.html',
                          title='Donor Details',
                          donor=donor_profile,
                          back_args={k: v for k, v in request.args.items()})


@admin.route('/urgent-requests', methods=['POST'])
@with_auth_context
@admin_required
def create_urgent_request(ctx):
    form = UrgentRequestForm()

    if not form.validate_on_submit():
        for field, errors in form.errors.items():
            for error in errors:
                flash(f'{getattr(form, field).label.text}: {error}', 'danger')
        return redirect(url_for('admin.dashboard'))

    try:
        urgent_request, matching_donors = broadcast_urgent_request(form.data, created_by=ctx.identity)
    except MissingFieldsError as e:
        flash(f'Validation Error: {str(e)}', 'danger')
        return redirect(url_for('admin.dashboard'))
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error creating urgent request: {str(e)}")
        flash(f'Error: {str(e)}', 'danger')
        return redirect(url_for('admin.dashboard'))

    flash(f'Urgent Request Created! Notified {len(matching_donors)} matching donors in {urgent_request.city}', 'success')
    return redirect(url_for('admin.dashboard'))


@admin.route('/urgent-requests/<int:request_id>/fulfill', methods=['POST'])
@with_auth_context
@admin_required
def fulfill_urgent_request(ctx, request_id):
    urgent_request = db.get_or_404(UrgentRequest, request_id)

    if not urgent_request.is_active:
        flash('This request has already been fulfilled.', 'warning')
        return redirect(url_for('admin.dashboard'))

    urgent_request.mark_fulfilled()
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Error fulfilling urgent request {request_id}: {str(e)}")
        flash(f'Error: {str(e)}', 'danger')
    else:
        current_app.logger.info(f"Urgent request {request_id} fulfilled by account {ctx.identity}")
        flash(f'Request for {urgent_request.blood_group} at {urgent_request.hospital_name} marked as fulfilled.', 'success')

    return redirect(url_for('admin.dashboard'))

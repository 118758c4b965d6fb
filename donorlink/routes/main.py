from flask import Blueprint, render_template, redirect, url_for, request, jsonify
from donorlink.models.donor import Donor
from donorlink.utils.auth_context import get_auth_context
from donorlink.utils.compatibility import COMPATIBILITY, SELECTOR_ORDER, compatibility, format_types

main = Blueprint('main', __name__)

DONATION_TYPES = {
    'red-blood-cells': {
        'title': 'Packed Red Blood Cells',
        'what_is_it': 'Whole blood collected from the donor is centrifuged to separate red cells, '
                      'platelets and plasma. The separated red cells are mixed with a preservative '
                      'to be called packed red blood cells.',
        'who_can_donate': 'You need to be 18-65 years old, weight 45kg or more and be fit and healthy.',
        'use_for': 'Correction of severe anemia and blood loss in child birth, surgery or trauma settings.',
    },
    'plasma': {
        'title': 'Plasma',
        'what_is_it': 'Plasma is the liquid portion of blood, about 90% water with proteins, antibodies '
                      'and clotting factors. It is separated from whole blood through apheresis.',
        'who_can_donate': 'You need to be 18-65 years old, weight 50kg or more, and be in good health.',
        'use_for': 'Liver failure, severe infections, burns, clotting disorders and immune deficiencies.',
    },
    'platelets': {
        'title': 'Platelets',
        'what_is_it': 'Platelets are tiny cell fragments that help blood clot. They are collected through '
                      'apheresis and the rest of the blood is returned to the donor.',
        'who_can_donate': 'You need to be 18-65 years old, weight 50kg or more and have a good platelet count.',
        'use_for': 'Chemotherapy and transplant patients, blood disorders and major surgeries.',
    },
}

@main.route('/')
@main.route('/home')
def home():
    ctx = get_auth_context()
    if ctx.is_authenticated:
        if ctx.is_admin():
            return redirect(url_for('admin.dashboard'))
        if Donor.for_user(ctx.identity) is None:
            return redirect(url_for('donor.register'))
        return redirect(url_for('donor.dashboard'))

    selected = request.args.get('blood_type', 'A+')
    if selected not in COMPATIBILITY:
        selected = 'A+'
    donation_type = request.args.get('donation_type', 'red-blood-cells')
    if donation_type not in DONATION_TYPES:
        donation_type = 'red-blood-cells'

    donors, recipients = compatibility(selected)
    return render_template('main/home.html',
                           title='Home',
                           blood_types=SELECTOR_ORDER,
                           selected_blood_type=selected,
                           compatible_donors=format_types(donors),
                           compatible_recipients=format_types(recipients),
                           donation_types=DONATION_TYPES,
                           selected_donation_type=donation_type)


@main.route('/compatibility')
def compatibility_lookup():
    """Return compatible donor and recipient types for ?blood_group="""
    blood_group = request.args.get('blood_group', '').strip()
    donors, recipients = compatibility(blood_group)
    return jsonify({
        'blood_group': blood_group,
        'donors': donors,
        'recipients': recipients
    })

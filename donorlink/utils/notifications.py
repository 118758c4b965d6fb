from donorlink import db
from donorlink.models.donor import Donor
from donorlink.models.urgent_request import UrgentRequest
from datetime import datetime
import logging

# Configure logging
logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('blood_group', 'hospital_name', 'city', 'contact_number')
OPTIONAL_FIELDS = ('units_needed', 'state', 'patient_name', 'urgency_level', 'additional_notes')


class MissingFieldsError(ValueError):
    """Raised when an urgent request is missing one of its required fields."""

    def __init__(self, fields):
        self.fields = list(fields)
        super().__init__(f"Please fill in all required fields: {', '.join(self.fields)}")


def _clean(value):
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def notify_donors(urgent_request, donors):
    """
    Announce an urgent request to the matching donors.
    No message is dispatched; each recipient is only logged.
    """
    for donor in donors:
        logger.info(
            f"Urgent request {urgent_request.id} ({urgent_request.blood_group}, "
            f"{urgent_request.city}): would notify donor {donor.id}"
        )
    return len(donors)


def broadcast_urgent_request(data, created_by=None):
    """
    Create an urgent blood request and look up the donors it concerns

    Args:
        data: mapping with the request fields; blood_group, hospital_name,
              city and contact_number must be non-empty
        created_by: ID of the admin account creating the request

    Returns:
        Tuple of (UrgentRequest, list of matching Donor rows)

    Raises:
        MissingFieldsError: before anything is written, if a required field is empty
    """
    missing = [field for field in REQUIRED_FIELDS if not _clean(data.get(field))]
    if missing:
        raise MissingFieldsError(missing)

    values = {field: _clean(data.get(field)) for field in REQUIRED_FIELDS + OPTIONAL_FIELDS}
    values['units_needed'] = values['units_needed'] or 1
    values['urgency_level'] = values['urgency_level'] or 'high'

    urgent_request = UrgentRequest(
        status='active',
        created_at=datetime.utcnow(),
        created_by=created_by,
        **values
    )
    db.session.add(urgent_request)
    db.session.commit()
    logger.info(f"Urgent request {urgent_request.id} created for {urgent_request.blood_group} at {urgent_request.hospital_name}")

    # Separate read; the count only feeds the confirmation message
    matching_donors = Donor.matching_request(urgent_request.blood_group, urgent_request.city).all()
    notify_donors(urgent_request, matching_donors)

    return urgent_request, matching_donors

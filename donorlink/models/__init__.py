from donorlink.models.user import User, UserRole, has_role
from donorlink.models.donor import Donor, BLOOD_GROUPS
from donorlink.models.urgent_request import UrgentRequest, URGENCY_LEVELS

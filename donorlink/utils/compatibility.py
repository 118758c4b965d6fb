# compatibility.py
# Static ABO/Rh lookup: which types a patient can receive from, and which
# patients a donor can give to.

COMPATIBILITY = {
    "A+": {"donors": ["O+", "O-", "A+", "A-"], "recipients": ["A+", "AB+"]},
    "O+": {"donors": ["O+", "O-"], "recipients": ["O+", "A+", "B+", "AB+"]},
    "B+": {"donors": ["O+", "O-", "B+", "B-"], "recipients": ["B+", "AB+"]},
    "AB+": {"donors": ["O+", "O-", "A+", "A-", "B+", "B-", "AB+", "AB-"], "recipients": ["AB+"]},
    "A-": {"donors": ["O-", "A-"], "recipients": ["A+", "A-", "AB+", "AB-"]},
    "O-": {"donors": ["O-"], "recipients": ["Everyone"]},
    "B-": {"donors": ["O-", "B-"], "recipients": ["B+", "B-", "AB+", "AB-"]},
    "AB-": {"donors": ["O-", "A-", "B-", "AB-"], "recipients": ["AB+", "AB-"]},
}

# Display order used by the blood type selector
SELECTOR_ORDER = ["A+", "O+", "B+", "AB+", "A-", "O-", "B-", "AB-"]


def compatible_donors(blood_type):
    entry = COMPATIBILITY.get(blood_type)
    return list(entry["donors"]) if entry else []


def compatible_recipients(blood_type):
    entry = COMPATIBILITY.get(blood_type)
    return list(entry["recipients"]) if entry else []


def compatibility(blood_type):
    """Return (donor types, recipient types) for a blood type; unknown types give two empty lists."""
    return compatible_donors(blood_type), compatible_recipients(blood_type)


def format_types(types):
    return " ".join(types) if types else "N/A"

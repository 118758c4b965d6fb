from datetime import date, datetime

def format_long_date(value, format_str="%B %d, %Y"):
    """
    Formats a date or datetime as e.g. 'March 05, 2025'
    """
    if value is None:
        return None
    return value.strftime(format_str)

def age_from_dob(dob, today=None):
    """
    Returns the age in whole years for a date of birth
    """
    if dob is None:
        return None
    if isinstance(dob, datetime):
        dob = dob.date()
    today = today or date.today()
    return today.year - dob.year - ((today.month, today.day) < (dob.month, dob.day))

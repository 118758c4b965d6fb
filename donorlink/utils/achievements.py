from collections import namedtuple

Badge = namedtuple('Badge', ['name', 'icon', 'color', 'description'])

WELCOME = Badge('Welcome', '\U0001F44B', 'blue', 'New Member')
GOLDEN_DONOR = Badge('Golden Donor', '\U0001F3C6', 'gold', 'First Donation Complete')
LIFE_SAVER = Badge('Life Saver', '❤️', 'red', 'Ready to Help')


def derive_badges(donor):
    """
    Compute the achievement badges for a donor record.
    Badges are never stored; this runs on every achievements page view.
    """
    badges = [WELCOME]

    if donor.last_donation_date:
        badges.append(GOLDEN_DONOR)

    if donor.available_to_donate:
        badges.append(LIFE_SAVER)

    return badges

from datetime import date
from types import SimpleNamespace
from donorlink.utils.achievements import derive_badges


def _donor(last_donation_date=None, available_to_donate=False):
    return SimpleNamespace(last_donation_date=last_donation_date, available_to_donate=available_to_donate)


def test_new_donor_gets_only_welcome():
    badges = derive_badges(_donor())
    assert [b.name for b in badges] == ['Welcome']


def test_last_donation_adds_golden_donor():
    badges = derive_badges(_donor(last_donation_date=date(2024, 1, 10)))
    assert [b.name for b in badges] == ['Welcome', 'Golden Donor']


def test_available_donor_with_history_gets_all_three():
    badges = derive_badges(_donor(last_donation_date=date(2024, 1, 10), available_to_donate=True))
    assert [b.name for b in badges] == ['Welcome', 'Golden Donor', 'Life Saver']


def test_available_without_history_skips_golden_donor():
    badges = derive_badges(_donor(available_to_donate=True))
    assert [b.name for b in badges] == ['Welcome', 'Life Saver']


def test_achievements_page_lists_badges(client, make_user, make_donor, login):
    user_id = make_user()
    make_donor(user_id, last_donation_date=date(2024, 3, 1), available_to_donate=False)
    login()

    response = client.get('/donor/achievements')
    assert response.status_code == 200
    assert b'Welcome' in response.data
    assert b'Golden Donor' in response.data
    assert b'Life Saver' not in response.data


def test_achievements_without_profile_redirects_to_registration(client, make_user, login):
    make_user()
    login()

    response = client.get('/donor/achievements')
    assert response.status_code == 302
    assert '/donor/register' in response.headers['Location']

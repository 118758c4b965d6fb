from donorlink.models import Donor


def _seed(make_donor):
    make_donor(full_name='Asha', blood_group='A+', city='Pune', state='Maharashtra')
    make_donor(full_name='Bala', blood_group='B+', city='Chennai', state='Tamil Nadu')
    make_donor(full_name='Chitra', blood_group='A+', city='Mumbai', state='Maharashtra')
    make_donor(full_name='Dev', blood_group='O-', city='Punalur', state='Kerala', available_to_donate=False)


def test_no_filters_returns_every_donor(app, make_donor):
    _seed(make_donor)
    with app.app_context():
        assert Donor.search().count() == 4
        assert Donor.search(blood_group='all', location='').count() == 4


def test_blood_group_filter_is_exact(app, make_donor):
    _seed(make_donor)
    with app.app_context():
        results = Donor.search(blood_group='A+').all()
        assert {d.full_name for d in results} == {'Asha', 'Chitra'}
        assert all(d.blood_group == 'A+' for d in results)


def test_location_matches_city_or_state_case_insensitively(app, make_donor):
    _seed(make_donor)
    with app.app_context():
        by_state = Donor.search(location='maharash').all()
        assert {d.full_name for d in by_state} == {'Asha', 'Chitra'}

        by_city = Donor.search(location='PUN').all()
        assert {d.full_name for d in by_city} == {'Asha', 'Dev'}
        for donor in by_city:
            assert 'pun' in donor.city.lower() or 'pun' in donor.state.lower()


def test_filters_combine(app, make_donor):
    _seed(make_donor)
    with app.app_context():
        results = Donor.search(blood_group='A+', location='mumbai').all()
        assert [d.full_name for d in results] == ['Chitra']
        assert Donor.search(blood_group='AB-', location='pune').count() == 0


def test_admin_search_renders_results(admin_client, make_donor):
    _seed(make_donor)
    response = admin_client.get('/admin/dashboard', query_string={'blood_group': 'A+', 'location': ''})
    assert response.status_code == 200
    assert b'Found 2 donor(s)' in response.data
    assert b'Asha' in response.data
    assert b'Chitra' in response.data
    assert b'Bala' not in response.data


def test_admin_search_is_paginated(app, admin_client, make_donor):
    app.config['DONOR_SEARCH_PER_PAGE'] = 2
    _seed(make_donor)

    first = admin_client.get('/admin/dashboard', query_string={'blood_group': 'all'})
    assert b'Found 4 donor(s)' in first.data
    assert b'Page 1 of 2' in first.data

    second = admin_client.get('/admin/dashboard', query_string={'blood_group': 'all', 'page': 2})
    assert second.status_code == 200
    assert b'Page 2 of 2' in second.data


def test_dashboard_stats(admin_client, make_donor):
    _seed(make_donor)
    response = admin_client.get('/admin/dashboard')
    assert b'Total Donors: <strong>4</strong>' in response.data
    assert b'Available Donors: <strong>3</strong>' in response.data
    assert b'Availability: <strong>75%</strong>' in response.data


def test_dashboard_stats_with_no_donors(admin_client):
    response = admin_client.get('/admin/dashboard')
    assert b'Availability: <strong>0%</strong>' in response.data


def test_donor_detail(admin_client, make_donor):
    donor_id = make_donor(full_name='Asha', medical_conditions='Mild asthma')
    response = admin_client.get(f'/admin/donors/{donor_id}')
    assert response.status_code == 200
    assert b'Asha' in response.data
    assert b'Mild asthma' in response.data
    assert b'tel:9876543210' in response.data


def test_donor_detail_missing_is_404(admin_client):
    assert admin_client.get('/admin/donors/999').status_code == 404


def test_location_wildcards_are_matched_literally(app, make_donor):
    make_donor(full_name='Asha', city='Pune', state='Maharashtra')
    make_donor(full_name='Bala', city='Chennai', state='Tamil Nadu')
    make_donor(full_name='Esha', city='Port_Blair', state='Andaman 100%')
    with app.app_context():
        assert [d.full_name for d in Donor.search(location='_').all()] == ['Esha']
        assert [d.full_name for d in Donor.search(location='%').all()] == ['Esha']
        assert Donor.search(location='P_ne').count() == 0


def test_invalid_blood_group_is_reported(admin_client, make_donor):
    make_donor(full_name='Asha')
    response = admin_client.get('/admin/dashboard', query_string={'blood_group': 'XYZ'})
    assert response.status_code == 200
    assert b'Not a valid choice' in response.data
    assert b'Search Results' not in response.data


def test_failed_search_rolls_back_and_still_renders(admin_client, monkeypatch):
    from sqlalchemy.exc import SQLAlchemyError
    from donorlink import db

    def broken_search(*args, **kwargs):
        raise SQLAlchemyError('connection lost')

    rollbacks = []
    monkeypatch.setattr(Donor, 'search', broken_search)
    monkeypatch.setattr(db.session, 'rollback', lambda: rollbacks.append(True))

    response = admin_client.get('/admin/dashboard', query_string={'blood_group': 'all'})
    assert response.status_code == 200
    assert b'Error: connection lost' in response.data
    assert b'Total Donors' in response.data
    assert rollbacks

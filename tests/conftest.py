from datetime import date
import pytest
from donorlink import create_app, db, bcrypt
from donorlink.models import User, UserRole, Donor

TEST_PASSWORD = 'secret123'


@pytest.fixture
def app():
    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
        'WTF_CSRF_ENABLED': False,
        'BCRYPT_LOG_ROUNDS': 4,
        'DONOR_SEARCH_PER_PAGE': 20,
        'LOG_LEVEL': 'WARNING',
    })
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(app):
    def _make_user(email='donor@example.com', password=TEST_PASSWORD, full_name='Test Donor', roles=()):
        with app.app_context():
            user = User(
                email=email,
                password=bcrypt.generate_password_hash(password).decode('utf-8'),
                full_name=full_name
            )
            db.session.add(user)
            db.session.flush()
            for role in roles:
                db.session.add(UserRole(user_id=user.id, role=role))
            db.session.commit()
            return user.id
    return _make_user


DONOR_DEFAULTS = {
    'full_name': 'Test Donor',
    'email': 'donor@example.com',
    'phone': '9876543210',
    'blood_group': 'O+',
    'age': 30,
    'gender': 'female',
    'date_of_birth': date(1994, 5, 17),
    'address': '12 Lake Road',
    'city': 'Pune',
    'state': 'Maharashtra',
    'pincode': '411001',
    'available_to_donate': True,
}


@pytest.fixture
def make_donor(app):
    counter = {'n': 0}

    def _make_donor(user_id=None, **overrides):
        with app.app_context():
            if user_id is None:
                counter['n'] += 1
                user = User(email=f"donor{counter['n']}@example.com", password='x')
                db.session.add(user)
                db.session.flush()
                user_id = user.id
            values = dict(DONOR_DEFAULTS, **overrides)
            donor = Donor(user_id=user_id, **values)
            db.session.add(donor)
            db.session.commit()
            return donor.id
    return _make_donor


@pytest.fixture
def login(client):
    def _login(email='donor@example.com', password=TEST_PASSWORD, login_as='user'):
        return client.post('/auth/login', data={
            'email': email,
            'password': password,
            'login_as': login_as,
        })
    return _login


@pytest.fixture
def admin_client(client, make_user, login):
    make_user(email='admin@example.com', full_name='Admin', roles=('admin',))
    response = login(email='admin@example.com', login_as='admin')
    assert response.status_code == 302
    return client

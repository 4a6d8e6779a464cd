import pytest
from werkzeug.security import generate_password_hash

from ledgertrack.app import create_app
from ledgertrack.extensions import db
from ledgertrack.models import Company, User


@pytest.fixture(scope='session')
def app():
    """Session-wide test `Flask` application."""
    app = create_app("testing")

    with app.app_context():
        db.create_all()
        yield app
        db.drop_all()


@pytest.fixture(scope='function')
def client(app):
    """A test client for the app."""
    return app.test_client()


@pytest.fixture(scope='function')
def db_session(app, clean_db):
    """Yields a database session for a test, wrapped in an app context."""
    with app.app_context():
        yield db.session


@pytest.fixture(scope='function')
def clean_db(app):
    """Ensures the database is clean before each test runs."""
    with app.app_context():
        # A fast way to clear all data from all tables
        for table in reversed(db.metadata.sorted_tables):
            db.session.execute(table.delete())
        db.session.commit()


@pytest.fixture(scope='function')
def companies(db_session):
    fish = Company(slug="africanut-fish-market", name="AFRICANUT FISH MARKET", sector="Aquaculture")
    media = Company(slug="africanut-media", name="AFRICANUT MEDIA", sector="Média & Communication")
    db_session.add_all([fish, media])
    db_session.commit()
    return {"fish": fish, "media": media}


@pytest.fixture(scope='function')
def user(db_session):
    u = User(
        email="comptable@africanut.test",
        name="Comptable",
        password_hash=generate_password_hash("secret", method="pbkdf2:sha256:1000"),
    )
    db_session.add(u)
    db_session.commit()
    return u


@pytest.fixture(scope='function')
def auth_client(client, user):
    """A test client with a logged-in session."""
    response = client.post("/auth/login", json={"email": user.email, "password": "secret"})
    assert response.status_code == 200
    return client

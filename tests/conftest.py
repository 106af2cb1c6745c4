import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from expiry_tracker.config import Settings
from expiry_tracker.database import get_db, init_db, make_engine
from expiry_tracker.dependencies import get_email_service, get_settings
from expiry_tracker.main import app


class RecordingMailer:
    """Stands in for EmailService and keeps every reset link it was asked to send"""

    def __init__(self):
        self.sent = []

    def send_password_reset(self, to_address, reset_link):
        self.sent.append((to_address, reset_link))

    @property
    def last_token(self):
        return self.sent[-1][1].rsplit("/", 1)[1]


@pytest.fixture
def test_settings():
    # Lowest bcrypt cost keeps the suite fast
    return Settings(
        jwt_secret="test-secret",
        bcrypt_rounds=4,
        reset_url_base="http://frontend.test/reset-password",
        smtp_host="",
    )


@pytest.fixture
def db_session():
    engine = make_engine("sqlite://", poolclass=StaticPool)
    init_db(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def mailer():
    return RecordingMailer()


@pytest.fixture
def client(db_session, test_settings, mailer):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_email_service] = lambda: mailer
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def register_and_login(client, email="alice@example.com", password="secret123"):
    res = client.post("/auth/register", json={"email": email, "password": password})
    assert res.status_code == 201, res.text
    res = client.post("/auth/login", json={"email": email, "password": password})
    assert res.status_code == 200, res.text
    return {"Authorization": f"Bearer {res.json()['token']}"}

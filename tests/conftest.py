# tests/conftest.py
import os
import sys
import pytest
from pathlib import Path
from datetime import datetime, UTC

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from fastapi.testclient import TestClient
from core.sa.database import Database, get_db
from core.sa.models import User, AuthSession, SavedBook, Recommendation
from core.sa.repositories.user import UserRepository

@pytest.fixture(scope="session")
def test_db_path(tmp_path_factory):
    """Create a temporary directory for the test database."""
    test_dir = tmp_path_factory.mktemp("test_db")
    return str(test_dir / "test_booktracker.db")

@pytest.fixture(scope="session")
def database_url(test_db_path):
    return f"sqlite:///{test_db_path}"

@pytest.fixture(scope="session")
def database(database_url, test_db_path):
    """Create a test database instance"""
    db = Database(database_url)
    
    # Drop all tables and recreate schema
    db.drop_db()
    db.init_db()
    
    yield db
    
    db.engine.dispose()
    try:
        os.remove(test_db_path)
    except OSError:
        pass

@pytest.fixture(scope="function")
def db_session(database):
    """Create a new database session for a test"""
    session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture(autouse=True)
def cleanup_db(db_session):
    """Clean up database tables before each test"""
    for model in (Recommendation, SavedBook, AuthSession, User):
        db_session.query(model).delete()
    db_session.commit()
    yield
    db_session.rollback()

@pytest.fixture
def sample_user(db_session):
    """Create a sample user for testing."""
    user = User(email="reader@example.com", name="Test Reader", image="https://example.com/avatar.png")
    db_session.add(user)
    db_session.commit()
    return user

@pytest.fixture
def other_user(db_session):
    user = User(email="other@example.com", name="Other Reader")
    db_session.add(user)
    db_session.commit()
    return user

@pytest.fixture
def make_book(db_session, sample_user):
    """Factory for saved books owned by the sample user unless told otherwise."""
    counter = {"n": 0}

    def _make_book(**overrides):
        counter["n"] += 1
        fields = {
            "user_id": sample_user.id,
            "book_id": f"vol_{counter['n']}",
            "title": f"Test Book {counter['n']}",
            "authors": ["Test Author"],
            "page_count": 200,
            "shelf": "want-to-read",
            "progress": 0,
            "notes": "",
            "saved_at": datetime.now(UTC),
        }
        fields.update(overrides)
        book = SavedBook(**fields)
        db_session.add(book)
        db_session.commit()
        return book

    return _make_book

@pytest.fixture
def auth_headers(db_session, sample_user):
    """Bearer token headers for the sample user."""
    token = UserRepository(db_session).create_auth_session(sample_user.id).token
    return {"Authorization": f"Bearer {token}"}

@pytest.fixture
def other_auth_headers(db_session, other_user):
    token = UserRepository(db_session).create_auth_session(other_user.id).token
    return {"Authorization": f"Bearer {token}"}

@pytest.fixture
def client(database):
    """API test client whose requests use the test database."""
    from api.main import app

    def override_get_db():
        session = database.get_session()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()

"""
pytest configuration: an in-memory database recreated for every test,
plus fixtures for users, tokens and seeded blogs.
"""

import os

os.environ["APP_ENV"] = "test"
os.environ["TEST_DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from config import get_settings  # noqa: E402
from core.security import get_password_hash  # noqa: E402
from database import SessionLocal, drop_db, init_db  # noqa: E402
from main import app  # noqa: E402
from models.blog import Blog  # noqa: E402
from models.user import User  # noqa: E402


INITIAL_BLOGS = [
    {
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
    },
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
    },
    {
        "title": "Canonical string reduction",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html",
        "likes": 12,
    },
]


@pytest.fixture(autouse=True)
def fresh_db():
    drop_db()
    init_db()
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


def make_user(db, settings, username="root", name="Garry Root", password="sekret"):
    user = User(
        username=username,
        name=name,
        password_hash=get_password_hash(password, settings),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def login(client, username="root", password="sekret"):
    response = client.post("/api/login", json={"username": username, "password": password})
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def root_user(db, settings):
    return make_user(db, settings)


@pytest.fixture
def auth_headers(client, root_user):
    return {"Authorization": f"bearer {login(client)}"}


@pytest.fixture
def other_headers(client, db, settings):
    make_user(db, settings, username="mluukkai", name="Matti Luukkainen", password="salainen")
    return {"Authorization": f"bearer {login(client, 'mluukkai', 'salainen')}"}


@pytest.fixture
def seeded_blogs(db, root_user):
    blogs = [Blog(**fields, user_id=root_user.id) for fields in INITIAL_BLOGS]
    db.add_all(blogs)
    db.commit()
    for blog in blogs:
        db.refresh(blog)
    return blogs

import os
from datetime import datetime, timedelta, timezone

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlmodel import SQLModel, Session, create_engine

from blog_api.db.models import Category, Comment, Post, PostLike, Status, User


@pytest.fixture
def engine(tmp_path):
    # File backed so concurrent feed reads each get their own connection
    engine = create_engine(
        f"sqlite:///{tmp_path / 'blog.db'}",
        connect_args={"check_same_thread": False},
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def blog(session):
    """Two categories, one status, two users and a handful of posts."""
    now = datetime.now(timezone.utc)
    session.add_all([
        Category(id=1, name="Tech"),
        Category(id=2, name="Cooking"),
        Status(id=1, status="publish"),
        User(id="admin-1", username="admin", name="Admin", role="admin"),
        User(id="user-1", username="reader", name="Reader", profile_pic="https://img/reader.png"),
    ])
    posts = [
        Post(id=1, title="Python tips", category_id=1, description="Tips for devs", content="Use venvs", status_id=1, date=now - timedelta(days=3)),
        Post(id=2, title="Rust intro", category_id=1, description="Systems", content="Ownership explained", status_id=1, date=now - timedelta(days=1)),
        Post(id=3, title="Pasta night", category_id=2, description="Dinner", content="Boil water, add PYTHON-shaped pasta", status_id=1, date=now - timedelta(days=2)),
        Post(id=4, title="Bread", category_id=2, description="Baking basics", content="Flour and water", status_id=1, date=now - timedelta(days=1)),
    ]
    session.add_all(posts)
    session.commit()
    return {"now": now}


@pytest.fixture
def add_comment(session):
    def _add(id, post_id, user_id, text, created_at):
        session.add(Comment(id=id, post_id=post_id, user_id=user_id, comment_text=text, created_at=created_at))
        session.commit()
    return _add


@pytest.fixture
def add_like(session):
    def _add(id, post_id, user_id, created_at):
        session.add(PostLike(id=id, post_id=post_id, user_id=user_id, created_at=created_at))
        session.commit()
    return _add

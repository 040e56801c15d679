"""Shared fixtures: a testing app on in-memory SQLite and row factories."""

from __future__ import annotations

from datetime import datetime

import pytest

from app import create_app
from extensions import db
from models import BlogPost, Founder, PortfolioItem, Service
from utils.data import DataClientError
from utils.security import reset_rate_limits


@pytest.fixture
def app():
    app = create_app('testing')
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture(autouse=True)
def _clear_rate_limits():
    reset_rate_limits()
    yield
    reset_rate_limits()


class FailingClient:
    """Data client whose backend is unreachable."""

    def query(self, table, filters=None, order=None, limit=None):
        raise DataClientError(f"backend down ({table})")

    def get_one(self, table, filters=None):
        raise DataClientError(f"backend down ({table})")

    def insert(self, table, row):
        raise DataClientError(f"backend down ({table})")


@pytest.fixture
def failing_backend(app):
    original = app.extensions['data_client']
    app.extensions['data_client'] = FailingClient()
    yield app.extensions['data_client']
    app.extensions['data_client'] = original


def add_post(slug, published_at=None, title=None, content='Some words here', **extra):
    post = BlogPost(
        id=extra.pop('id', slug),
        title=title or slug.replace('-', ' ').title(),
        slug=slug,
        content=content,
        published_at=published_at,
        **extra,
    )
    db.session.add(post)
    db.session.commit()
    return post


@pytest.fixture
def make_post(app):
    return add_post


@pytest.fixture
def seeded(app):
    """A small but complete data set across every content table."""
    db.session.add(Founder(id='f1', name='Sixty Four', bio='Builder of things.', image=''))
    for i, (title, icon) in enumerate([
        ('Web Development', '🌐'),
        ('Landing Pages', '📄'),
        ('Bots', '🤖'),
        ('Graphics', '🎨'),
        ('Social Media', '📱'),
    ]):
        db.session.add(Service(id=f's{i}', title=title, description=f'{title} done right', icon=icon))
    for i, (name, category) in enumerate([
        ('Green Leaf Shop', 'E-commerce'),
        ('City Dental Clinic', 'Web Development'),
        ('Nova Coffee Brand', 'Design'),
        ('Fit Track App', 'Mobile'),
    ]):
        db.session.add(PortfolioItem(id=f'p{i}', name=name, description='A project', link='https://example.com',
                                     category=category))
    db.session.commit()

    add_post('oldest', published_at=datetime(2024, 1, 15, 9, 0))
    add_post('middle', published_at=datetime(2024, 2, 20, 9, 0))
    add_post('newest', published_at=datetime(2024, 3, 12, 9, 0))
    add_post('latest', published_at=datetime(2024, 4, 1, 9, 0))
    add_post('draft', published_at=None)
    return app

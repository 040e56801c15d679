"""Tests for the data client backends and the fail-silent query helpers."""

from __future__ import annotations

from datetime import datetime

import pytest
import requests
from sqlalchemy.exc import OperationalError

from extensions import db
from models import ContactMessage
from utils.data import (
    EQ, IS, NEQ, NOT_IS,
    DataClientError, RestDataClient, SqlDataClient,
    create_data_client, safe_get_one, safe_query,
)


# ════════════════════════════════════════════════════════════════════
# SqlDataClient
# ════════════════════════════════════════════════════════════════════

def test_sql_query_published_newest_first(seeded):
    rows = SqlDataClient().query(
        'blogs', filters=[('published_at', NOT_IS, None)], order=('published_at', True))
    assert [r['slug'] for r in rows] == ['latest', 'newest', 'middle', 'oldest']


def test_sql_query_is_null_filter(seeded):
    rows = SqlDataClient().query('blogs', filters=[('published_at', IS, None)])
    assert [r['slug'] for r in rows] == ['draft']


def test_sql_query_eq_neq_and_limit(seeded):
    client = SqlDataClient()
    assert client.query('blogs', filters=[('slug', EQ, 'middle')])[0]['id'] == 'middle'
    rows = client.query('blogs', filters=[('id', NEQ, 'middle')], order=('published_at', False), limit=2)
    assert len(rows) == 2
    assert all(r['id'] != 'middle' for r in rows)


def test_sql_get_one(seeded):
    client = SqlDataClient()
    assert client.get_one('founder')['name'] == 'Sixty Four'
    assert client.get_one('blogs', filters=[('slug', EQ, 'nope')]) is None


def test_sql_rows_are_plain_dicts(seeded):
    row = SqlDataClient().get_one('blogs', filters=[('slug', EQ, 'oldest')])
    assert isinstance(row, dict)
    assert row['published_at'] == datetime(2024, 1, 15, 9, 0)
    assert set(row) >= {'id', 'title', 'slug', 'content', 'cover_image', 'published_at', 'created_at'}


@pytest.mark.parametrize("kwargs", [
    {'table': 'users'},
    {'table': 'blogs', 'filters': [('nope', EQ, 1)]},
    {'table': 'blogs', 'filters': [('slug', 'like', 'x')]},
    {'table': 'blogs', 'filters': [('slug', IS, 'x')]},
    {'table': 'blogs', 'order': ('nope', True)},
])
def test_sql_malformed_queries_raise(app, kwargs):
    table = kwargs.pop('table')
    with pytest.raises(DataClientError):
        SqlDataClient().query(table, **kwargs)


def test_sql_query_failure_rolls_back_so_next_query_runs(seeded, monkeypatch):
    rollbacks = []
    real_execute = db.session.execute
    real_rollback = db.session.rollback

    def broken_execute(*args, **kwargs):
        raise OperationalError('SELECT', {}, Exception('current transaction is aborted'))

    def spy_rollback():
        rollbacks.append(True)
        real_rollback()

    monkeypatch.setattr(db.session, 'rollback', spy_rollback)
    monkeypatch.setattr(db.session, 'execute', broken_execute)
    client = SqlDataClient()
    assert safe_query(client, 'services') == []
    assert rollbacks == [True]

    monkeypatch.setattr(db.session, 'execute', real_execute)
    assert len(safe_query(client, 'portfolio')) == 4


def test_sql_insert(app):
    SqlDataClient().insert('contact_messages', {
        'name': 'Jane', 'email': 'jane@example.com', 'project_type': 'other', 'message': 'Hi'})
    stored = db.session.query(ContactMessage).one()
    assert stored.name == 'Jane'
    assert stored.created_at is not None


@pytest.mark.parametrize("row", [
    {'email': 'jane@example.com', 'project_type': 'other', 'message': 'Hi'},
    {'name': 'Jane', 'email': 'j@e.com', 'project_type': 'other', 'message': 'Hi', 'bogus': 1},
])
def test_sql_insert_failure_rolls_back(app, row):
    with pytest.raises(DataClientError):
        SqlDataClient().insert('contact_messages', row)
    assert db.session.query(ContactMessage).count() == 0


# ════════════════════════════════════════════════════════════════════
# RestDataClient
# ════════════════════════════════════════════════════════════════════

class FakeResponse:
    def __init__(self, payload=None, status_code=200, invalid_json=False):
        self.payload = payload
        self.status_code = status_code
        self.invalid_json = invalid_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self.invalid_json:
            raise ValueError("no json")
        return self.payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.headers = {}
        self.response = response or FakeResponse([])
        self.error = error
        self.calls = []

    def _respond(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error:
            raise self.error
        return self.response

    def get(self, url, **kwargs):
        return self._respond('GET', url, **kwargs)

    def post(self, url, **kwargs):
        return self._respond('POST', url, **kwargs)


def _rest(session, timeout=7):
    return RestDataClient('https://demo.supabase.co/', 'anon-key', timeout=timeout, session=session)


def test_rest_sets_auth_headers():
    session = FakeSession()
    _rest(session)
    assert session.headers['apikey'] == 'anon-key'
    assert session.headers['Authorization'] == 'Bearer anon-key'


def test_rest_query_builds_postgrest_params():
    session = FakeSession(FakeResponse([{'id': '1'}]))
    rows = _rest(session).query(
        'blogs',
        filters=[('published_at', NOT_IS, None), ('id', NEQ, 'abc'), ('slug', EQ, 'hello')],
        order=('published_at', True),
        limit=3)

    assert rows == [{'id': '1'}]
    method, url, kwargs = session.calls[0]
    assert method == 'GET'
    assert url == 'https://demo.supabase.co/rest/v1/blogs'
    assert kwargs['params'] == [
        ('select', '*'),
        ('published_at', 'not.is.null'),
        ('id', 'neq.abc'),
        ('slug', 'eq.hello'),
        ('order', 'published_at.desc'),
        ('limit', '3'),
    ]
    assert kwargs['timeout'] == 7


def test_rest_get_one_uses_limit_one():
    session = FakeSession(FakeResponse([]))
    assert _rest(session).get_one('founder') is None
    assert ('limit', '1') in session.calls[0][2]['params']


def test_rest_insert_posts_single_row_array():
    session = FakeSession(FakeResponse(None, status_code=201))
    row = {'name': 'Jane', 'email': 'j@e.com', 'project_type': 'other', 'message': 'Hi'}
    _rest(session).insert('contact_messages', row)

    method, url, kwargs = session.calls[0]
    assert method == 'POST'
    assert url.endswith('/rest/v1/contact_messages')
    assert kwargs['json'] == [row]
    assert kwargs['headers'] == {'Prefer': 'return=minimal'}


@pytest.mark.parametrize("session", [
    FakeSession(error=requests.ConnectionError("refused")),
    FakeSession(error=requests.Timeout("slow")),
    FakeSession(FakeResponse({'message': 'JWT expired'}, status_code=401)),
    FakeSession(FakeResponse(invalid_json=True)),
    FakeSession(FakeResponse({'not': 'a list'})),
])
def test_rest_query_failures_raise_data_client_error(session):
    with pytest.raises(DataClientError):
        _rest(session).query('services')


def test_rest_insert_failure_raises():
    session = FakeSession(FakeResponse({'message': 'denied'}, status_code=403))
    with pytest.raises(DataClientError):
        _rest(session).insert('contact_messages', {'name': 'x'})


def test_rest_rejects_unknown_table_without_request():
    session = FakeSession()
    with pytest.raises(DataClientError):
        _rest(session).query('users')
    assert session.calls == []


def test_rest_requires_base_url():
    with pytest.raises(ValueError):
        RestDataClient('', 'key')


# ════════════════════════════════════════════════════════════════════
# backend selection and safe helpers
# ════════════════════════════════════════════════════════════════════

def test_create_data_client_selects_backend(app):
    assert isinstance(create_data_client(app), SqlDataClient)

    app.config['DATA_BACKEND'] = 'rest'
    app.config['SUPABASE_URL'] = 'https://demo.supabase.co'
    app.config['SUPABASE_KEY'] = 'anon-key'
    client = create_data_client(app)
    assert isinstance(client, RestDataClient)
    assert client.base_url == 'https://demo.supabase.co/rest/v1'

    app.config['DATA_BACKEND'] = 'carrier-pigeon'
    with pytest.raises(ValueError):
        create_data_client(app)


def test_safe_helpers_swallow_failures(app, failing_backend, caplog):
    assert safe_query(failing_backend, 'services') == []
    assert safe_get_one(failing_backend, 'founder') is None
    assert 'rendering empty' in caplog.text


def test_safe_helpers_pass_results_through(seeded):
    client = SqlDataClient()
    assert len(safe_query(client, 'services', limit=2)) == 2
    assert safe_get_one(client, 'founder')['id'] == 'f1'

"""
Data Client Module - Narrow read/insert access to the site's tables
Two interchangeable backends: the hosted Supabase REST API (PostgREST)
and a local database through Flask-SQLAlchemy.
"""

import requests
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from extensions import db
from models import TABLE_MODELS


TABLES = ('founder', 'services', 'portfolio', 'blogs', 'contact_messages')

# Filter operators: (column, operator, value)
EQ = 'eq'
NEQ = 'neq'
IS = 'is'          # value None -> column IS NULL
NOT_IS = 'not.is'  # value None -> column IS NOT NULL
OPERATORS = (EQ, NEQ, IS, NOT_IS)


class DataClientError(Exception):
    """Raised when the backend cannot answer a query or accept an insert"""


def _check_table(table):
    if table not in TABLES:
        raise DataClientError(f"Unknown table: {table}")


def _check_filters(filters):
    for column, op, value in filters or ():
        if op not in OPERATORS:
            raise DataClientError(f"Unsupported operator '{op}' on column '{column}'")
        if op in (IS, NOT_IS) and value is not None:
            raise DataClientError(f"Operator '{op}' only supports null on column '{column}'")


class RestDataClient:
    """Client for a PostgREST endpoint such as Supabase's /rest/v1"""

    def __init__(self, base_url, api_key, timeout=10, session=None):
        if not base_url:
            raise ValueError("base_url is required for the REST data backend")
        self.base_url = base_url.rstrip('/') + '/rest/v1'
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            'apikey': api_key or '',
            'Authorization': f"Bearer {api_key or ''}",
            'Accept': 'application/json',
        })

    def _params(self, filters=None, order=None, limit=None):
        params = [('select', '*')]
        for column, op, value in filters or ():
            if op in (IS, NOT_IS):
                params.append((column, f"{op}.null"))
            else:
                params.append((column, f"{op}.{value}"))
        if order:
            column, descending = order
            params.append(('order', f"{column}.{'desc' if descending else 'asc'}"))
        if limit is not None:
            params.append(('limit', str(int(limit))))
        return params

    def query(self, table, filters=None, order=None, limit=None):
        _check_table(table)
        _check_filters(filters)
        url = f"{self.base_url}/{table}"
        try:
            response = self.session.get(url, params=self._params(filters, order, limit), timeout=self.timeout)
            response.raise_for_status()
            rows = response.json()
        except requests.RequestException as e:
            raise DataClientError(f"Query on '{table}' failed: {e}") from e
        except ValueError as e:
            raise DataClientError(f"Query on '{table}' returned invalid JSON") from e
        if not isinstance(rows, list):
            raise DataClientError(f"Query on '{table}' returned {type(rows).__name__}, expected a list")
        return rows

    def get_one(self, table, filters=None):
        rows = self.query(table, filters=filters, limit=1)
        return rows[0] if rows else None

    def insert(self, table, row):
        _check_table(table)
        url = f"{self.base_url}/{table}"
        try:
            response = self.session.post(
                url,
                json=[row],
                headers={'Prefer': 'return=minimal'},
                timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise DataClientError(f"Insert into '{table}' failed: {e}") from e


class SqlDataClient:
    """Same contract as RestDataClient, backed by the SQLAlchemy models"""

    def _model(self, table):
        _check_table(table)
        return TABLE_MODELS[table]

    def _column(self, model, name):
        column = model.__table__.columns.get(name)
        if column is None:
            raise DataClientError(f"Unknown column '{name}' on table '{model.__tablename__}'")
        return column

    def query(self, table, filters=None, order=None, limit=None):
        model = self._model(table)
        _check_filters(filters)
        stmt = db.select(model)
        for name, op, value in filters or ():
            column = self._column(model, name)
            if op == EQ:
                stmt = stmt.where(column == value)
            elif op == NEQ:
                stmt = stmt.where(column != value)
            elif op == IS:
                stmt = stmt.where(column.is_(None))
            else:
                stmt = stmt.where(column.is_not(None))
        if order:
            name, descending = order
            column = self._column(model, name)
            stmt = stmt.order_by(column.desc() if descending else column.asc())
        if limit is not None:
            stmt = stmt.limit(int(limit))
        try:
            return [row.to_dict() for row in db.session.execute(stmt).scalars()]
        except SQLAlchemyError as e:
            # PostgreSQL refuses further statements until the aborted transaction ends
            db.session.rollback()
            raise DataClientError(f"Query on '{table}' failed: {e}") from e

    def get_one(self, table, filters=None):
        rows = self.query(table, filters=filters, limit=1)
        return rows[0] if rows else None

    def insert(self, table, row):
        model = self._model(table)
        try:
            db.session.add(model(**row))
            db.session.commit()
        except (SQLAlchemyError, TypeError) as e:
            db.session.rollback()
            raise DataClientError(f"Insert into '{table}' failed: {e}") from e


def create_data_client(app):
    """Build the backend selected by DATA_BACKEND"""
    backend = app.config.get('DATA_BACKEND', 'sql')
    if backend == 'rest':
        return RestDataClient(
            app.config.get('SUPABASE_URL'),
            app.config.get('SUPABASE_KEY'),
            timeout=app.config.get('DATA_REQUEST_TIMEOUT', 10))
    if backend == 'sql':
        return SqlDataClient()
    raise ValueError(f"Unknown DATA_BACKEND: {backend}")


def init_data_client(app):
    app.extensions['data_client'] = create_data_client(app)
    app.logger.info(f"✓ Data backend: {app.config.get('DATA_BACKEND')}")


def get_data_client():
    return current_app.extensions['data_client']


def safe_query(client, table, **kwargs):
    """Query that logs failures and returns an empty list instead of raising"""
    try:
        return client.query(table, **kwargs)
    except DataClientError as e:
        current_app.logger.warning(f"Query failed, rendering empty: {str(e)}")
        return []


def safe_get_one(client, table, filters=None):
    try:
        return client.get_one(table, filters=filters)
    except DataClientError as e:
        current_app.logger.warning(f"Lookup failed, rendering empty: {str(e)}")
        return None


__all__ = [
    'TABLES',
    'EQ', 'NEQ', 'IS', 'NOT_IS',
    'DataClientError',
    'RestDataClient',
    'SqlDataClient',
    'create_data_client',
    'init_data_client',
    'get_data_client',
    'safe_query',
    'safe_get_one'
]

"""
Seed Command: JSON to database
Loads founder, services, portfolio and blog content into the local
SQL backend so the site can run without the hosted backend.

Usage:
    flask --app app seed-content [PATH] [--reset]
"""

import json
import os
from datetime import timezone

import click
from flask import current_app
from flask.cli import with_appcontext
from sqlalchemy.exc import SQLAlchemyError

from extensions import db
from models import Founder, Service, PortfolioItem, BlogPost, ContactMessage
from utils.formatters import parse_timestamp

DEFAULT_SEED_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'seed_content.json')

# Seed key -> (model, columns copied from JSON)
SEED_TABLES = {
    'founder': (Founder, ('id', 'name', 'bio', 'image')),
    'services': (Service, ('id', 'title', 'description', 'icon')),
    'portfolio': (PortfolioItem, ('id', 'name', 'description', 'image', 'link', 'category')),
    'blogs': (BlogPost, ('id', 'title', 'slug', 'content', 'cover_image', 'published_at', 'created_at')),
}
DATE_COLUMNS = ('published_at', 'created_at')


def load_seed_file(path):
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def to_naive_utc(value):
    """Timestamp columns are stored as naive UTC"""
    if value is not None and getattr(value, 'tzinfo', None) is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def parse_date(key, row_id, column, value):
    """Blank stays NULL; any other value must be an ISO-8601 timestamp"""
    if value is None or value == '':
        return None
    parsed = parse_timestamp(value)
    if parsed is None:
        raise ValueError(f"{key} {row_id}: {column} {value!r} is not an ISO-8601 timestamp")
    return to_naive_utc(parsed)


def seed_table(key, rows):
    """Insert rows whose id is not stored yet, return how many were added"""
    model, columns = SEED_TABLES[key]
    added = 0
    for row_json in rows:
        if row_json.get('id') and db.session.get(model, row_json['id']):
            click.echo(f"  {key} {row_json['id']} already exists, skipping...")
            continue
        values = {col: row_json.get(col) for col in columns if col in row_json}
        for col in DATE_COLUMNS:
            if col in values:
                values[col] = parse_date(key, row_json.get('id'), col, values[col])
        if values.get('created_at', True) is None:
            del values['created_at']
        db.session.add(model(**values))
        added += 1
    return added


def seed_content(data, reset=False):
    """
    Load seed data into the database

    Args:
        data (dict): Mapping of founder/services/portfolio/blogs to row lists
        reset (bool): Delete existing content rows first (contact messages are kept)

    Returns:
        dict: Table key -> number of rows added
    """
    if reset:
        for model, _ in SEED_TABLES.values():
            db.session.query(model).delete()

    counts = {}
    for key in SEED_TABLES:
        rows = data.get(key, [])
        click.echo(f"Seeding {len(rows)} {key}...")
        counts[key] = seed_table(key, rows)

    db.session.commit()
    current_app.logger.info(f"Seeded content: {counts}")
    return counts


@click.command('seed-content')
@click.argument('path', required=False, default=DEFAULT_SEED_FILE, type=click.Path(exists=True, dir_okay=False))
@click.option('--reset', is_flag=True, help='Remove existing founder/services/portfolio/blog rows first.')
@with_appcontext
def seed_content_command(path, reset):
    """Load demo content from a JSON file into the SQL backend."""
    if current_app.config.get('DATA_BACKEND') != 'sql':
        raise click.ClickException('seed-content only targets the sql backend (DATA_BACKEND=sql)')

    db.create_all()
    try:
        counts = seed_content(load_seed_file(path), reset=reset)
    except (OSError, ValueError, SQLAlchemyError) as e:
        db.session.rollback()
        raise click.ClickException(f"Seeding failed: {e}")

    click.echo(f"[OK] Added {sum(counts.values())} rows; "
               f"{db.session.query(ContactMessage).count()} contact messages on file.")


__all__ = ['seed_content', 'seed_content_command', 'load_seed_file']

"""
Formatters Module - Pure text/date helpers used by view-models and templates
"""

import math
from datetime import date, datetime
from typing import Optional, Union

WORDS_PER_MINUTE = 200
EXCERPT_LENGTH = 150
ELLIPSIS = '…'

MONTH_NAMES = (
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December'
)


def parse_timestamp(value: Union[str, date, None]) -> Optional[date]:
    """Accept datetime/date objects or ISO-8601 strings (a trailing Z is allowed)"""
    if value is None or value == '':
        return None
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def format_date(value: Union[str, date, None]) -> str:
    """Format a timestamp as "Month D, YYYY", e.g. "January 5, 2024"."""
    if value is None or value == '':
        return ''
    parsed = parse_timestamp(value)
    if parsed is None:
        return str(value)
    return f"{MONTH_NAMES[parsed.month - 1]} {parsed.day}, {parsed.year}"


def word_count(text: Optional[str]) -> int:
    return len((text or '').split())


def reading_time_minutes(text: Optional[str]) -> int:
    """Estimated minutes to read `text` at 200 words per minute, never below 1."""
    return max(1, math.ceil(word_count(text) / WORDS_PER_MINUTE))


def truncate(text: Optional[str], max_len: int = EXCERPT_LENGTH) -> str:
    text = text or ''
    if len(text) <= max_len:
        return text
    return text[:max_len] + ELLIPSIS


def initials(title: Optional[str], max_chars: int = 3) -> str:
    """First letter of each word, e.g. "Build Fast Bots Now" -> "BFB"."""
    return ''.join(word[0] for word in (title or '').split())[:max_chars]


def register_template_filters(app):
    app.jinja_env.filters['format_date'] = format_date
    app.jinja_env.filters['reading_time'] = reading_time_minutes
    app.jinja_env.filters['excerpt'] = truncate
    app.jinja_env.filters['initials'] = initials


__all__ = [
    'WORDS_PER_MINUTE',
    'EXCERPT_LENGTH',
    'parse_timestamp',
    'format_date',
    'word_count',
    'reading_time_minutes',
    'truncate',
    'initials',
    'register_template_filters'
]

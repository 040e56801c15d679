"""
Utils Package - Centralized utility modules initialization
"""

from .data import (
    DataClientError,
    RestDataClient,
    SqlDataClient,
    create_data_client,
    init_data_client,
    get_data_client,
    safe_query,
    safe_get_one
)
from .formatters import (
    format_date,
    reading_time_minutes,
    truncate,
    initials,
    register_template_filters
)
from .icons import resolve_icon, get_icon_class, register_icon_filters
from .contact import ContactSubmission, SubmissionState
from .notifications import notify_new_contact_message, send_telegram_message
from .security import get_client_ip, check_rate_limit, reset_rate_limits
from .ui_helpers import inject_blueprint_assets, get_page_specific_class

__all__ = [
    # Data
    'DataClientError',
    'RestDataClient',
    'SqlDataClient',
    'create_data_client',
    'init_data_client',
    'get_data_client',
    'safe_query',
    'safe_get_one',

    # Formatters
    'format_date',
    'reading_time_minutes',
    'truncate',
    'initials',
    'register_template_filters',

    # Icons
    'resolve_icon',
    'get_icon_class',
    'register_icon_filters',

    # Contact
    'ContactSubmission',
    'SubmissionState',

    # Notifications
    'notify_new_contact_message',
    'send_telegram_message',

    # Security
    'get_client_ip',
    'check_rate_limit',
    'reset_rate_limits',

    # UI Helpers
    'inject_blueprint_assets',
    'get_page_specific_class'
]

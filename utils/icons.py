"""
Icons Module - Service icon system
Maps the symbol key stored on a service row to a Font Awesome icon
"""

DEFAULT_ICON = 'globe'

SERVICE_ICONS = {
    'globe': {
        'symbol': '🌐',
        'label': 'Web Development',
        'icon': 'fa-globe'
    },
    'code': {
        'symbol': '📄',
        'label': 'Landing Pages',
        'icon': 'fa-code'
    },
    'bot': {
        'symbol': '🤖',
        'label': 'Bots',
        'icon': 'fa-robot'
    },
    'palette': {
        'symbol': '🎨',
        'label': 'Graphics',
        'icon': 'fa-palette'
    },
    'smartphone': {
        'symbol': '📱',
        'label': 'Social Media',
        'icon': 'fa-mobile-alt'
    }
}

# Stored symbol -> icon name
SYMBOL_TO_ICON = {info['symbol']: name for name, info in SERVICE_ICONS.items()}


def resolve_icon(key):
    """
    Resolve a service icon key

    Args:
        key (str): Emoji symbol stored in the services table, or an icon name

    Returns:
        str: Icon name from SERVICE_ICONS, DEFAULT_ICON for anything unknown
    """
    if not key:
        return DEFAULT_ICON
    key = str(key).strip()
    if key in SERVICE_ICONS:
        return key
    return SYMBOL_TO_ICON.get(key, DEFAULT_ICON)


def get_icon_class(key):
    """Font Awesome class for a service icon key"""
    return SERVICE_ICONS[resolve_icon(key)]['icon']


def register_icon_filters(app):
    app.jinja_env.filters['service_icon'] = get_icon_class


__all__ = [
    'DEFAULT_ICON',
    'SERVICE_ICONS',
    'resolve_icon',
    'get_icon_class',
    'register_icon_filters'
]

"""
UI Helper Functions for Blueprint-Specific Assets
=================================================

Each blueprint can ship its own CSS/JS. The context processor looks up
the active blueprint (and endpoint) and hands the asset lists to base.html,
which links them after the shared stylesheet.
"""

from flask import request
from typing import List, Dict, Optional


BLUEPRINT_CSS_MAP = {
    'pages': [
        'css/pages/public.css',
    ],
    'services': [
        'css/pages/public.css',
    ],
    'portfolio': [
        'css/pages/public.css',
    ],
    'blog': [
        'css/pages/public.css',
        'css/pages/blog.css',
    ],
}

# Scripts are only needed by individual endpoints
ENDPOINT_JS_MAP = {
    'pages.contact': [
        'js/contact.js',
    ],
}


def get_blueprint_styles(blueprint_name: Optional[str]) -> List[str]:
    """
    CSS files for a blueprint

    Example:
        >>> get_blueprint_styles('blog')
        ['css/pages/public.css', 'css/pages/blog.css']
    """
    if not blueprint_name:
        return []
    return list(BLUEPRINT_CSS_MAP.get(blueprint_name, []))


def get_endpoint_scripts(endpoint: Optional[str]) -> List[str]:
    if not endpoint:
        return []
    return list(ENDPOINT_JS_MAP.get(endpoint, []))


def inject_blueprint_assets() -> Dict[str, List[str]]:
    """
    Assets for the current request, used by the app context processor

    Returns:
        dict: blueprint_styles, blueprint_scripts and current_blueprint
    """
    blueprint_name = request.blueprint if request.blueprint else None

    return {
        'blueprint_styles': get_blueprint_styles(blueprint_name),
        'blueprint_scripts': get_endpoint_scripts(request.endpoint),
        'current_blueprint': blueprint_name,
    }


def get_page_specific_class(blueprint_name: Optional[str], route_name: Optional[str] = None) -> str:
    """
    CSS class for the <body> of a page

    Example:
        >>> get_page_specific_class('blog', 'post_detail')
        'page-blog page-blog-post_detail'
    """
    if not blueprint_name:
        return 'page-default'

    classes = [f'page-{blueprint_name}']

    if route_name:
        classes.append(f'page-{blueprint_name}-{route_name}')

    return ' '.join(classes)


__all__ = [
    'get_blueprint_styles',
    'get_endpoint_scripts',
    'inject_blueprint_assets',
    'get_page_specific_class'
]

"""
Portfolio Blueprint - Public portfolio views
Handles: Portfolio listing with category filter
"""

from flask import Blueprint

portfolio_bp = Blueprint('portfolio', __name__, url_prefix='')

from . import routes

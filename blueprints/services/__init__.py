"""
Services Blueprint - Service offerings
Handles: Services listing with details and process phases
"""

from flask import Blueprint

services_bp = Blueprint('services', __name__, url_prefix='')

from . import routes

"""
Blog Blueprint - Articles
Handles: Blog listing (featured + grid) and post detail pages
"""

from flask import Blueprint

blog_bp = Blueprint('blog', __name__, url_prefix='')

from . import routes

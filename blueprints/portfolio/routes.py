"""
Portfolio Routes - Public portfolio views
"""

from flask import render_template, request
from utils.data import get_data_client
from utils.viewmodels import build_portfolio
from . import portfolio_bp


@portfolio_bp.route('/portfolio')
def list_portfolio():
    """Portfolio listing, optionally narrowed with ?category="""
    view = build_portfolio(get_data_client(), category=request.args.get('category'))
    return render_template('portfolio/list.html', view=view)

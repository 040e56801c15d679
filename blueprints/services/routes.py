"""
Services Routes - Service offerings
"""

from flask import render_template
from utils.data import get_data_client
from utils.viewmodels import build_services
from . import services_bp


@services_bp.route('/services')
def list_services():
    """All services with their features, technologies and our process"""
    view = build_services(get_data_client())
    return render_template('services/list.html', view=view)

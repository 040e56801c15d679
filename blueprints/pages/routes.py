"""
Pages Routes - Public pages
"""

from datetime import datetime
from flask import render_template, redirect, url_for, request, flash, current_app
from utils.data import get_data_client, safe_query
from utils.viewmodels import build_home, build_about, PUBLISHED, NEWEST_FIRST
from utils.contact import ContactSubmission, empty_values, read_values
from utils.notifications import notify_new_contact_message
from utils.security import check_rate_limit
from utils.site_content import PROJECT_TYPES, CONTACT_INFO, TELEGRAM_URL, WHATSAPP_URL
from . import pages_bp


@pages_bp.route('/')
def index():
    """Landing page - featured services and recent work"""
    view = build_home(get_data_client())
    return render_template('pages/index.html', view=view)


@pages_bp.route('/about')
def about():
    """About page - founder bio, stats and values"""
    view = build_about(get_data_client())
    return render_template('pages/about.html', view=view)


def _render_contact(values, errors=None, status=200):
    return render_template('pages/contact.html',
                           values=values,
                           errors=errors or {},
                           project_types=PROJECT_TYPES,
                           contact_info=CONTACT_INFO,
                           telegram_url=TELEGRAM_URL,
                           whatsapp_url=WHATSAPP_URL), status


def _flash_notification(title, message, category):
    flash({'title': title, 'message': message}, category)


@pages_bp.route('/contact', methods=['GET', 'POST'])
def contact():
    """Contact page and form processing - inserts one contact_messages row"""
    if request.method == 'GET':
        return _render_contact(empty_values())

    # Honeypot spam protection
    if request.form.get('website'):
        current_app.logger.info("Contact form honeypot triggered")
        return redirect(url_for('pages.contact'))

    if not check_rate_limit('contact'):
        _flash_notification('Too many requests', 'Please wait a minute before sending another message.', 'danger')
        return _render_contact(read_values(request.form), status=429)

    submission = ContactSubmission(get_data_client(), notify=notify_new_contact_message)
    result = submission.submit(request.form)
    note = result.notification
    _flash_notification(note.title, note.message, note.category)

    if result.ok:
        return redirect(url_for('pages.contact'))

    return _render_contact(result.values, result.errors, status=400 if result.errors else 503)


@pages_bp.route('/sitemap.xml')
def sitemap():
    """Generate dynamic sitemap for SEO"""
    base_url = request.url_root.rstrip('/')
    today = datetime.now().strftime('%Y-%m-%d')

    sitemap_entries = []
    for endpoint, priority in (('pages.index', '1.0'),
                               ('pages.about', '0.7'),
                               ('services.list_services', '0.8'),
                               ('portfolio.list_portfolio', '0.8'),
                               ('blog.list_posts', '0.8'),
                               ('pages.contact', '0.6')):
        sitemap_entries.append({
            'loc': f"{base_url}{url_for(endpoint)}",
            'changefreq': 'weekly',
            'priority': priority,
            'lastmod': today
        })

    for post in safe_query(get_data_client(), 'blogs', filters=PUBLISHED, order=NEWEST_FIRST):
        published = str(post.get('published_at') or today)
        sitemap_entries.append({
            'loc': f"{base_url}{url_for('blog.post_detail', slug=post['slug'])}",
            'changefreq': 'monthly',
            'priority': '0.6',
            'lastmod': published[:10]
        })

    # .xml templates are autoescaped
    response = current_app.make_response(render_template('sitemap.xml', entries=sitemap_entries))
    response.headers['Content-Type'] = 'application/xml; charset=utf-8'
    return response


@pages_bp.route('/robots.txt')
def robots():
    """Generate robots.txt for SEO"""
    robots_txt = """User-agent: *
Allow: /
Disallow: /static/

Sitemap: """ + request.url_root.rstrip('/') + "/sitemap.xml"

    response = current_app.make_response(robots_txt)
    response.headers['Content-Type'] = 'text/plain; charset=utf-8'
    return response

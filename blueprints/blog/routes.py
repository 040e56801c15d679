"""
Blog Routes - Published articles
"""

from flask import render_template
from utils.data import get_data_client
from utils.viewmodels import build_blog_list, build_blog_detail
from . import blog_bp


@blog_bp.route('/blog')
def list_posts():
    """Published posts, newest first; the first one is featured"""
    view = build_blog_list(get_data_client())
    return render_template('blog/list.html', view=view)


@blog_bp.route('/blog/<slug>')
def post_detail(slug):
    """Single post with up to three related posts"""
    view = build_blog_detail(get_data_client(), slug)
    if not view.found:
        return render_template('blog/not_found.html', view=view), 404
    return render_template('blog/detail.html', view=view)

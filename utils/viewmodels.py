"""
View-models Module - Per-page state built fresh on every request

Each builder takes a data client, issues its page's read queries and
returns a frozen snapshot for the template. Queries are independent:
a failing one leaves its section empty and the rest of the page renders.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .data import EQ, NEQ, NOT_IS, safe_query, safe_get_one
from .site_content import (
    ABOUT_STATS, ABOUT_VALUES, ALL_CATEGORIES, PORTFOLIO_CATEGORIES,
    PROCESS_PHASES, get_service_details
)

HOME_SERVICES_LIMIT = 4
HOME_PORTFOLIO_LIMIT = 3
RELATED_POSTS_LIMIT = 3

PUBLISHED = [('published_at', NOT_IS, None)]
NEWEST_FIRST = ('published_at', True)


@dataclass(frozen=True)
class HomeView:
    services: Tuple[dict, ...] = ()
    portfolio: Tuple[dict, ...] = ()


@dataclass(frozen=True)
class AboutView:
    founder: Optional[dict] = None
    stats: Tuple[dict, ...] = tuple(ABOUT_STATS)
    values: Tuple[dict, ...] = tuple(ABOUT_VALUES)


@dataclass(frozen=True)
class ServiceEntry:
    service: dict
    details: Optional[dict] = None


@dataclass(frozen=True)
class ServicesView:
    entries: Tuple[ServiceEntry, ...] = ()
    phases: Tuple[dict, ...] = tuple(PROCESS_PHASES)

    @property
    def services(self):
        return tuple(entry.service for entry in self.entries)


@dataclass(frozen=True)
class PortfolioView:
    items: Tuple[dict, ...] = ()
    active_category: str = ALL_CATEGORIES
    categories: Tuple[str, ...] = tuple(PORTFOLIO_CATEGORIES)


@dataclass(frozen=True)
class BlogListView:
    posts: Tuple[dict, ...] = ()

    @property
    def featured(self):
        """First post of the newest-first listing"""
        return self.posts[0] if self.posts else None

    @property
    def grid(self):
        return self.posts[1:]


@dataclass(frozen=True)
class BlogDetailView:
    slug: str
    post: Optional[dict] = None
    related: Tuple[dict, ...] = field(default_factory=tuple)

    @property
    def found(self):
        return self.post is not None


def build_home(client):
    services = safe_query(client, 'services', limit=HOME_SERVICES_LIMIT)
    portfolio = safe_query(client, 'portfolio', limit=HOME_PORTFOLIO_LIMIT)
    return HomeView(services=tuple(services), portfolio=tuple(portfolio))


def build_about(client):
    return AboutView(founder=safe_get_one(client, 'founder'))


def build_services(client):
    services = safe_query(client, 'services')
    entries = tuple(
        ServiceEntry(service=service, details=get_service_details(service.get('title')))
        for service in services
    )
    return ServicesView(entries=entries)


def normalize_category(category):
    """Map a requested category onto PORTFOLIO_CATEGORIES, unknown values become 'All'"""
    category = (category or '').strip()
    return category if category in PORTFOLIO_CATEGORIES else ALL_CATEGORIES


def filter_by_category(items, category):
    category = normalize_category(category)
    if category == ALL_CATEGORIES:
        return list(items)
    return [item for item in items if item.get('category') == category]


def build_portfolio(client, category=None):
    active = normalize_category(category)
    items = safe_query(client, 'portfolio')
    return PortfolioView(items=tuple(filter_by_category(items, active)), active_category=active)


def build_blog_list(client):
    posts = safe_query(client, 'blogs', filters=PUBLISHED, order=NEWEST_FIRST)
    return BlogListView(posts=tuple(posts))


def build_blog_detail(client, slug):
    post = safe_get_one(client, 'blogs', filters=[('slug', EQ, slug)])
    if post is None:
        return BlogDetailView(slug=slug)

    related = safe_query(
        client, 'blogs',
        filters=PUBLISHED + [('id', NEQ, post['id'])],
        order=NEWEST_FIRST,
        limit=RELATED_POSTS_LIMIT)
    # Never the current post, at most RELATED_POSTS_LIMIT entries
    related = [p for p in related if p.get('id') != post['id']][:RELATED_POSTS_LIMIT]
    return BlogDetailView(slug=slug, post=post, related=tuple(related))


__all__ = [
    'HomeView',
    'AboutView',
    'ServiceEntry',
    'ServicesView',
    'PortfolioView',
    'BlogListView',
    'BlogDetailView',
    'build_home',
    'build_about',
    'build_services',
    'normalize_category',
    'filter_by_category',
    'build_portfolio',
    'build_blog_list',
    'build_blog_detail'
]

"""
Security Module - Client IP resolution and contact-form rate limiting
"""

import time
from flask import request, current_app


# Rate Limiting
RATE_LIMIT_REQUESTS = {}  # {ip: [(timestamp, endpoint), ...]}
RATE_LIMIT_MAX_REQUESTS = 5
RATE_LIMIT_WINDOW = 60  # seconds


def get_client_ip():
    """
    Get client IP address

    X-Forwarded-For is only honoured through ProxyFix (see TRUSTED_PROXY_COUNT),
    which rewrites REMOTE_ADDR from the hops our own proxies appended.
    """
    return request.remote_addr or 'unknown'


def check_rate_limit(endpoint='contact'):
    """Check if IP is within rate limit, recording this request when it is"""
    max_requests = current_app.config.get('CONTACT_RATE_LIMIT', RATE_LIMIT_MAX_REQUESTS)
    window = current_app.config.get('CONTACT_RATE_WINDOW', RATE_LIMIT_WINDOW)
    client_ip = get_client_ip()
    current_time = time.time()

    prune_rate_limits(window, current_time)

    recent = RATE_LIMIT_REQUESTS.get(client_ip, [])
    endpoint_requests = [ep for ts, ep in recent if ep == endpoint]
    if len(endpoint_requests) >= max_requests:
        current_app.logger.warning(f"Rate limit hit for {client_ip} on {endpoint}")
        return False

    RATE_LIMIT_REQUESTS.setdefault(client_ip, []).append((current_time, endpoint))
    return True


def prune_rate_limits(window, current_time=None):
    """Drop requests outside the window, and IPs left with none"""
    current_time = current_time or time.time()
    for ip in list(RATE_LIMIT_REQUESTS):
        recent = [(ts, ep) for ts, ep in RATE_LIMIT_REQUESTS[ip] if current_time - ts < window]
        if recent:
            RATE_LIMIT_REQUESTS[ip] = recent
        else:
            del RATE_LIMIT_REQUESTS[ip]


def reset_rate_limits():
    RATE_LIMIT_REQUESTS.clear()


__all__ = [
    'get_client_ip',
    'check_rate_limit',
    'prune_rate_limits',
    'reset_rate_limits'
]

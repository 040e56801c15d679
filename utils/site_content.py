"""
Site Content Module - Static copy rendered alongside the fetched data
"""

SITE_TAGLINE = (
    'Professional freelancing services in web development, design, and digital marketing. '
    'Helping businesses establish their digital presence.'
)

QUICK_LINKS = [
    {'endpoint': 'pages.index', 'label': 'Home'},
    {'endpoint': 'pages.about', 'label': 'About'},
    {'endpoint': 'services.list_services', 'label': 'Services'},
    {'endpoint': 'portfolio.list_portfolio', 'label': 'Portfolio'},
    {'endpoint': 'blog.list_posts', 'label': 'Blog'},
    {'endpoint': 'pages.contact', 'label': 'Contact'},
]

# Messaging deep links are fixed, not configurable at runtime
TELEGRAM_URL = 'https://t.me/sixty4bit'
WHATSAPP_URL = 'https://wa.me/1234567890'

SOCIAL_LINKS = [
    {'label': 'Telegram', 'href': TELEGRAM_URL, 'icon': 'fa-paper-plane'},
    {'label': 'WhatsApp', 'href': WHATSAPP_URL, 'icon': 'fa-comment'},
    {'label': 'LinkedIn', 'href': 'https://linkedin.com/company/sixty4bit', 'icon': 'fa-linkedin'},
    {'label': 'GitHub', 'href': 'https://github.com/sixty4bit', 'icon': 'fa-github'},
]

CONTACT_INFO = [
    {
        'label': 'Email',
        'value': 'hello@sixty4bitfreelancing.com',
        'href': 'mailto:hello@sixty4bitfreelancing.com',
        'icon': 'fa-envelope'
    },
    {
        'label': 'Phone',
        'value': '+1 (555) 123-4567',
        'href': 'tel:+15551234567',
        'icon': 'fa-phone'
    },
    {
        'label': 'Location',
        'value': 'Remote & Worldwide',
        'href': None,
        'icon': 'fa-map-marker-alt'
    },
]

ABOUT_STATS = [
    {'value': '50+', 'label': 'Happy Clients', 'icon': 'fa-users'},
    {'value': '100+', 'label': 'Projects Completed', 'icon': 'fa-award'},
    {'value': '2+', 'label': 'Years Experience', 'icon': 'fa-clock'},
    {'value': '98%', 'label': 'Success Rate', 'icon': 'fa-bullseye'},
]

ABOUT_VALUES = [
    {
        'title': 'Quality First',
        'description': 'We never compromise on quality. Every project is crafted with attention '
                       'to detail and modern best practices.'
    },
    {
        'title': 'Innovation',
        'description': 'We stay ahead of the curve by adopting the latest technologies and '
                       'innovative approaches to problem-solving.'
    },
    {
        'title': 'Client-Centric',
        'description': 'Your success is our success. We work closely with you to understand '
                       'your needs and exceed expectations.'
    },
    {
        'title': 'Reliability',
        'description': 'Count on us to deliver on time, every time. We value your trust and '
                       'work hard to maintain it.'
    },
]

# Keyed by service title as stored in the services table
SERVICE_DETAILS = {
    'Web Development': {
        'features': [
            'Custom Web Applications',
            'E-commerce Solutions',
            'Content Management Systems',
            'API Development & Integration',
            'Database Design & Optimization',
            'Performance Optimization',
        ],
        'technologies': ['React', 'Next.js', 'Node.js', 'PostgreSQL', 'MongoDB', 'AWS'],
    },
    'Landing Pages': {
        'features': [
            'High-Converting Designs',
            'Mobile-First Approach',
            'SEO Optimization',
            'A/B Testing Setup',
            'Analytics Integration',
            'Lead Capture Forms',
        ],
        'technologies': ['HTML5', 'CSS3', 'JavaScript', 'React', 'Tailwind CSS', 'Framer Motion'],
    },
    'Bots': {
        'features': [
            'Chatbot Development',
            'Telegram Bot Creation',
            'Discord Bot Development',
            'WhatsApp Business Integration',
            'AI-Powered Responses',
            'Custom Automation Scripts',
        ],
        'technologies': ['Python', 'Node.js', 'Telegram API', 'Discord.js', 'OpenAI API', 'Webhooks'],
    },
    'Graphics': {
        'features': [
            'Brand Identity Design',
            'Logo Creation',
            'Social Media Graphics',
            'Marketing Materials',
            'UI/UX Design',
            'Print Design',
        ],
        'technologies': ['Adobe Creative Suite', 'Figma', 'Canva Pro', 'Sketch', 'InVision', 'Principle'],
    },
    'Social Media': {
        'features': [
            'Social Media Strategy',
            'Content Creation',
            'Paid Advertising Campaigns',
            'Community Management',
            'Analytics & Reporting',
            'Influencer Outreach',
        ],
        'technologies': ['Facebook Ads', 'Google Ads', 'Instagram', 'LinkedIn', 'Twitter', 'TikTok'],
    },
}

PROCESS_PHASES = [
    {'step': '01', 'title': 'Discovery',
     'description': 'We start by understanding your goals, requirements, and target audience.'},
    {'step': '02', 'title': 'Planning',
     'description': 'We create a detailed project plan with timelines, milestones, and deliverables.'},
    {'step': '03', 'title': 'Development',
     'description': 'Our team brings your vision to life using the latest technologies and best practices.'},
    {'step': '04', 'title': 'Launch',
     'description': 'We deploy your project and provide ongoing support to ensure everything runs smoothly.'},
]

ALL_CATEGORIES = 'All'
PORTFOLIO_CATEGORIES = [ALL_CATEGORIES, 'Web Development', 'Design', 'E-commerce', 'Mobile']

# Contact form project_type values, in display order
PROJECT_TYPES = {
    'web-development': 'Web Development',
    'landing-page': 'Landing Page',
    'bot-development': 'Bot Development',
    'graphics-design': 'Graphics Design',
    'social-media': 'Social Media Management',
    'consultation': 'Consultation',
    'other': 'Other',
}


def get_service_details(title):
    """Features/technologies for a service title, or None when the title is unknown"""
    return SERVICE_DETAILS.get((title or '').strip())


__all__ = [
    'SITE_TAGLINE',
    'QUICK_LINKS',
    'TELEGRAM_URL',
    'WHATSAPP_URL',
    'SOCIAL_LINKS',
    'CONTACT_INFO',
    'ABOUT_STATS',
    'ABOUT_VALUES',
    'SERVICE_DETAILS',
    'PROCESS_PHASES',
    'ALL_CATEGORIES',
    'PORTFOLIO_CATEGORIES',
    'PROJECT_TYPES',
    'get_service_details'
]

"""
Blueprints Package - Modular application structure
Each blueprint handles one section of the public site
"""

__all__ = ['pages', 'services', 'portfolio', 'blog']

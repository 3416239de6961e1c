"""Toyozu parts storefront: cart, checkout and catalog service"""

__version__ = "1.0.0"

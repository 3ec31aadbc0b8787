"""Store module for e-commerce functionality.

Provides the session shopping cart and checkout for catalog products.
"""

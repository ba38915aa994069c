"""
Unit tests for the storefront app.

Test structure:
- test_search.py: Product search filter and search API
- test_api.py: Catalog API (categories, products, pagination, filters)
- test_cart.py: Cart module and session cart views
- test_storage.py: Key/value storages
"""

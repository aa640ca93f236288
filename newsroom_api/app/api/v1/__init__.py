"""
Version 1 of the API.

This subpackage bundles the article, journalist and category
endpoints.
"""

"""
Routes package for the login demo.

This package contains route blueprints:
- api: health endpoint polled before the browser suite starts
- views: the fixture HTML pages
"""

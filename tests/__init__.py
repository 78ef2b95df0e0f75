"""
Test suite for the login demo.

This package contains:
- ui/: Browser-based tests of the login page using Playwright
- unit/: Configuration, fixture app and live-server helper tests
- smoke/: Standalone checks of plain assertion behaviour
"""

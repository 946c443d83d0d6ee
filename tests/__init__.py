"""
Blog Posts API Test Suite

Tests are organized into:
- unit/: Tests for individual functions and methods
- integration/: Tests for API endpoints against an ephemeral database
- fixtures/: Reusable test data, seeding and teardown
"""

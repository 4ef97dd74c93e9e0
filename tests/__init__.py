"""Test suite for aria-automation-client.

Test structure:
- unit/: Domain, infrastructure and handler logic in isolation
- integration/: HTTP clients against a pytest-httpx mocked transport
"""

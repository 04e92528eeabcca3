"""
API package.

Exposes ``router`` in ``api.router`` which bundles every endpoint
module under ``api/endpoints``.
"""

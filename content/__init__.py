"""
Content app package for the community platform backend.

Provides the tenant-scoped blog: the ``Post`` model, public read
endpoints for published posts and the admin CRUD viewset.
"""

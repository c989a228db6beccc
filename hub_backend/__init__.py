"""
Package initializer for the multi-tenant community platform backend.
"""

"""Resolver package for the GraphQL schema.

Root query, field and mutation functions referenced by the types, queries and
mutations. Each resolver reads the store from the GraphQL context.
"""

"""Resolver package for GraphQL schema.

Resolvers take the Strawberry ``info`` object and the field arguments. Shared
dependencies (``db``, ``tokens``, ``request``) come from ``info.context``.
"""

"""Resolver package for the GraphQL schema.

Functions here translate between strawberry types and the resolution engine.
Root and relationship fields on the types call into these modules; the engine
executors are taken from the request context built by ``graphql.context``.
"""

"""Domain layer — constructor strategies and the error taxonomy.

This layer depends only on stdlib.
It must never import from introspection, factory, loading, or config.
"""

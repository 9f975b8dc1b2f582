"""Domain layer: the brand constructor and its label rules.

This layer depends only on stdlib.
It must never import from config.
"""

"""Domain layer: the exact-arithmetic Fibonacci engine.

This layer depends only on the stdlib.
It must never import from services, config, output, or commands.
"""

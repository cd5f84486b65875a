"""Domain layer — PIN types, grammar, and the Identifier value.

This layer depends only on the stdlib.
It must never import from services, config, output, or commands.
"""

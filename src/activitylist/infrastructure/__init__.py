"""Infrastructure layer: output sinks.

This layer depends only on the stdlib.
It must never import from domain, services, commands, or output.
"""

"""Infrastructure layer — filesystem traversal and go.mod discovery.

This layer depends on the stdlib only. It must never import from
services, commands, or output.
"""

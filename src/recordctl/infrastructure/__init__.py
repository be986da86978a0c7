"""Infrastructure layer — filesystem and console I/O.

This layer depends on stdlib, Click, and the pure domain helpers.
It must never import from services, commands, or output.
"""

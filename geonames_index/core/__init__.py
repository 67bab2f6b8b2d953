"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants (coordinate bounds, earth radius, field layout)
- exceptions: Custom exception hierarchy
"""

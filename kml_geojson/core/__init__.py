"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Namespaces, geometry type order, style property keys
- exceptions: Custom exception hierarchy
"""

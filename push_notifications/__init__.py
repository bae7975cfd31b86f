# push_notifications/__init__.py
"""
Push notification pipeline package.

This package contains:
- main: FastAPI application entrypoint
- notifications: factory / strategy / decorator / builder pipeline
- utils: environment variable helpers
"""

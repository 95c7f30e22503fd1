"""Bloglist backend. The ASGI application lives in ``bloglist.main:app``."""

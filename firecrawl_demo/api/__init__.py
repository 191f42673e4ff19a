"""FastAPI HTTP layer package.

The ASGI application lives in :mod:`firecrawl_demo.api.app`::

    uvicorn firecrawl_demo.api.app:app --reload
"""

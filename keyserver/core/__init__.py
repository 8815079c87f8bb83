"""Core helpers shared by the key server's request handlers.

Modules in this package are stateless: input validation, request-context
inspection, error signalling and small reusable helpers. Only
``middleware`` depends on a running FastAPI application.
"""

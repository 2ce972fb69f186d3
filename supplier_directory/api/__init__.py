"""
HTTP API
FastAPI application exposing the public catalogue and the admin console.
"""

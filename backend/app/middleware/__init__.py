# Middleware package init
"""
ScholarHub Backend — Middleware Package
=========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: correlation id for logs and error bodies
    2. Logging: method, path, query, params, body, status, duration
    3. CORS: FastAPI's CORSMiddleware, origins from settings

Authentication and role checks are not middleware: they are per-route
FastAPI dependencies (app.dependencies), because only some routes need them.
"""

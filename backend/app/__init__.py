"""
ScholarHub Backend — Application Package
==========================================

Backend API of the scholarship-discovery site.

    ┌─────────────────────────────────────┐
    │     Routes + Dependencies (HTTP)    │  ← auth, role checks, id parsing
    ├─────────────────────────────────────┤
    │        Services (Business Logic)    │  ← one service per collection,
    │                                     │    tokens, Stripe payments
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← injected async engine/sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"

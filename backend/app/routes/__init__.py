# Routes package init
"""
ScholarHub Backend — API Routes Package
=========================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - auth.py:          POST /jwt
    - users.py:         /users ...
    - scholarships.py:  /scholarships ...
    - applications.py:  /applyScholarship, /applyScholarships ...
    - reviews.py:       /reviews ...
    - payments.py:      POST /create-payment-intent
    - health.py:        GET /, GET /health

Routes stay THIN: extract request data, call one service method, return its
result. Authentication, role checks and id parsing live in app.dependencies.
"""

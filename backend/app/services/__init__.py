# Services package init
"""
ScholarHub Backend — Services Layer
=====================================

What:  Business logic between routes (HTTP) and the database.
How:   Collection services are stateless module-level instances that receive
       the request's session on every call. TokenService and PaymentService
       hold secrets, so create_app() builds them from Settings and stores
       them on app.state.

Service Inventory:
    - DocumentService: find_all / find_one / insert_one / update_one / delete_one
    - UserService, ScholarshipService, ApplicationService, ReviewService
    - TokenService: access token issue / verify (PyJWT)
    - PaymentService: Stripe PaymentIntent creation
"""

"""
Service layer abstraction.

Services hold the business logic of the bank and know nothing about
HTTP.  Routers obtain them through FastAPI dependencies.
"""

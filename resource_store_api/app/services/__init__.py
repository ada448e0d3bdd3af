"""
Service layer abstraction.

Each service encapsulates the business logic for one resource family.
Collections live in memory and are owned by a ``ResourceStore``; API
handlers reach them only through the store they are given.
"""

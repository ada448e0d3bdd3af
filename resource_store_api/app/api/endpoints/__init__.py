"""
Endpoint subpackage.

``resources`` builds the CRUD route table used for every resource
family; ``health`` and ``frontend`` hold the routes outside ``/api``.
The routers are aggregated in ``api/router.py``.
"""

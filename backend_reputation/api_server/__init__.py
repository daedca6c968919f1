"""
API server package — HTTP interface.

Serves reputation profiles and forwards role-scoring requests. Provider
clients are built once per process in the app lifespan and shared by all
requests.
"""

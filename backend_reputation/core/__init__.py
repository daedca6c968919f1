"""
Core utilities — domain exceptions and cross-cutting concerns shared by the
fetchers, the aggregator and the API server.
"""

"""
In-process catalog backends.

LocalCatalogApiClient runs ProductService directly, so the storefront works
with no API server running and the synchronizer can be exercised in tests.
It raises the same CatalogApiError statuses (400, 404, 503) the HTTP client
would surface from the real API.
"""

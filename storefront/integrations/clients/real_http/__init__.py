"""
HTTP catalog backends.

CatalogApiClient talks to storefront.api.main (or any server speaking the
same /products envelope) through httpx. bootstrap.build_api_client() picks
it when INTEGRATIONS_MODE=real or STOREFRONT_API_URL is set.
"""

class CatalogUpstreamError(RuntimeError):
    """Raised when the product list backend fails (timeouts, network errors, non-2xx responses)."""
    pass


class CatalogContractError(RuntimeError):
    """Raised when the product list backend violates the response contract (bad shape or success=false)."""
    pass

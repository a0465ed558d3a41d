"""Error handling helpers for the storefront API."""
from typing import Any, Dict
import logging

logger = logging.getLogger(__name__)


class ErrorHandler:
    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
        """Log an unexpected exception and build a failure envelope for the client."""
        logger.error("Unhandled exception in storefront API: %s", exc, exc_info=True)
        return {
            "success": False,
            "error": "An internal error occurred while processing your request. Please try again later.",
            "message": str(exc),
            "data": None,
            "context": context or {},
        }

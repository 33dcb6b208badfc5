"""Record store adapters for the products bounded context."""

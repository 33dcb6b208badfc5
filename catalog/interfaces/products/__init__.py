"""Products bounded context: HTTP interface."""

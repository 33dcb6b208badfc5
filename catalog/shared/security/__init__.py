"""Security middleware: headers, origin policy and rate limiting."""

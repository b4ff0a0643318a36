"""Resource objects returned by the client."""

"""HTTP service and CLI surfaces for the gateway."""

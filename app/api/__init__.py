"""HTTP boundary: dependencies and versioned routers."""

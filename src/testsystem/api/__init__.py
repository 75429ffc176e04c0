"""HTTP layer: routers, contracts and dependency wiring."""

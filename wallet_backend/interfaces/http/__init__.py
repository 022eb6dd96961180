"""HTTP interface: routers, dependencies and error handlers."""

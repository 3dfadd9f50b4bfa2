"""Cross-cutting routers."""

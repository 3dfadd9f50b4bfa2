"""Learning context routers."""

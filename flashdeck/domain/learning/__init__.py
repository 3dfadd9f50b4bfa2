"""Learning bounded context - Domain layer."""

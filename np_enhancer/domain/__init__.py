"""Domain layer: pure entities, exceptions and matching rules."""

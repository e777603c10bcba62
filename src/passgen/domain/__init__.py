"""Password policy domain: entities, services and exceptions."""

"""Domain layer: entities, include directives and change tracking."""

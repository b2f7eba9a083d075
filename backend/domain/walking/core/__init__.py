"""Core walking model: entities, value objects, events, errors and ports."""

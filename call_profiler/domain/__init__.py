"""Domain layer: entities, value objects, helpers and interfaces.

Nothing in this layer performs I/O or reads the clock directly.
"""

"""
Domain layer: slide entity, value objects and exceptions.
"""

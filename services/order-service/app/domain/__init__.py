"""
Domain layer - order, pricing and document entities plus pricing rules.

Independent of HTTP and of the on-disk representation.
"""

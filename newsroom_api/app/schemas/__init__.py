"""
Pydantic schema definitions for API payloads.

Each resource defines a ``*Create`` model (all fields optional so that
presence checks happen in the store and answer with 400), an
``*Update`` model used as a partial patch, and a ``*Read`` model which
doubles as the stored entity.
"""

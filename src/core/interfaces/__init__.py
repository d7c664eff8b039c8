"""Core interfaces/abstractions.

Why:
- Defines contracts (Protocol) implemented by adapters and UI layers.
- Inverts dependencies: the Core depends on abstractions.
"""

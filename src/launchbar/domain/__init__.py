"""Domain layer - resolver types and abstractions.

This layer contains:
- types: Candidate variants and field values
- protocols: Interfaces of the host collaborators
- events: Domain events and event bus

The domain layer has no dependencies on application, infrastructure, or presentation layers.
"""

"""
octopus_client.observability

Observability package.

Responsibilities:
- Provide structured logging configuration and logger helpers.
"""

# Package marker.

"""
octopus_client.resources

Resource package: wire models, link navigation and the JSON codec.

Responsibilities:
- Describe server resources (interruptions, users, list envelopes) as typed models.
- Translate between the PascalCase wire format and Python objects.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing in this package performs I/O; it is safe to use from any thread or task.

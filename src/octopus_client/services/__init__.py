"""
octopus_client.services

Service-layer package.

Responsibilities:
- Expose the public operations of each API area on top of the resource client.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services are pure Python over `ResourceClient` and easily testable with a stubbed transport.

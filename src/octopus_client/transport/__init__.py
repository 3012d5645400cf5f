"""
octopus_client.transport

HTTP transport package.

Responsibilities:
- Provide the generic resource client the services issue requests through.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services depend on `ResourceClient`, never on httpx directly.

"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants for CRS names and GeoJSON type tags
- events: Listener lists used for change and error notification
- exceptions: Custom exception hierarchy
- fetch: Asynchronous JSON fetching over HTTP
"""

"""WebSocket handlers package."""

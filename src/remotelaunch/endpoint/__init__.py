"""HTTP endpoint module for remotelaunch.

Exposes the command registry and launcher over a small GET-only HTTP
API with an open CORS policy.
"""

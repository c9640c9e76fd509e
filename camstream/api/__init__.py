"""
API layer for the camera stream bridge.

Exposes the HLS/RTMP stream routes (/live, /rtmp/auth) and the camera
endpoints under /api/v1/cameras.
"""

"""
camstream: root package.

This package contains the FastAPI app entry point (main.py), the stream
bridge that turns camera RTSP feeds into on-demand HLS, camera URL
resolution, the cached camera directory and the infrastructure behind them
(MongoDB, ffmpeg process control, filesystem polling).
"""

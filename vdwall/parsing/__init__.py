"""
This package contains the modules that turn caller input into bytes for
the video-wall processor.

Sub-packages:

- ``options``: Host-style option bags, placeholder resolution and action parsing.
- ``commands``: Fixed-length command frame construction.
"""

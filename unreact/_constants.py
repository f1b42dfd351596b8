"""Common literal values used across unreact.

These constants keep the development paths and fixed responses in one place so
the builder, renderer, and dev server agree on them.

Examples
--------
>>> from unreact import _constants
>>> _constants.DEV_BUILD_DIR
'.devbuild'
>>> _constants.DEV_URL
'http://127.0.0.1:8080'
"""

DEV_BUILD_DIR = ".devbuild"
PUBLIC_SUBDIR = "public"
HOST = "127.0.0.1"
PORT = 8080
ADDRESS = f"{HOST}:{PORT}"
DEV_URL = f"http://{ADDRESS}"
DEV_SCRIPT = """
  <script>
    console.warn("This document is in *development mode*");
  </script>
"""
NOT_FOUND_FALLBACK = "404 - File not found. Custom 404 page not found."
DEFAULT_SITE_CONFIG = "unreact.yaml"

"""
Sol Command-Line Interface
==========================

- **soltok**: scan a sol source file and print its tokens

Each tool is implemented as a Click-based CLI application.
"""

__all__ = ["soltok"]

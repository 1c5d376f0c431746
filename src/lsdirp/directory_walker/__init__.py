"""Directory traversal with ignore rules, depth limits and symlink cycle protection.

This package provides the walker that lists the entries below a single root and
the guard that keeps symlink traversal finite.
"""

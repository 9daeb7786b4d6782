"""Integration tests.

Exercise the file store against a real filesystem under ``tmp_path``: row
layout, atomic rewrites, malformed rows and I/O failures.
"""

"""Attempt result scoring — value semantics, multi-blind codec, averages,
cutoffs, time limits, data-entry warnings and display formatting.

Pure functions over plain integers and pydantic value objects. Nothing here
touches MCP, the environment or any other I/O; the server wraps it.
"""

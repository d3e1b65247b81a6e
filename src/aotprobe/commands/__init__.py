"""CLI command implementations for aotprobe.

This package contains the implementation of each CLI command,
separated from the CLI framework setup in cli.py:
- init: Write the config template
- probe: Measure this process and render the timeline
- detect: Show the AOT cache mode for runtime arguments
"""

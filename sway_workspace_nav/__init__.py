"""
Sway Workspace Navigator

Switch workspaces on Sway/i3 with optional multi-monitor awareness.
Computes the next or previous workspace linearly, per output, across
outputs, or following the physical output layout.
"""

__version__ = "0.4.0"
__author__ = "NixOS Configuration Team"

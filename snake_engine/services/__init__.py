"""
Collaborators that present frames: text, curses and video renderers.
"""

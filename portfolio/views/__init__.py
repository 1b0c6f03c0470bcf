"""View rendering module for HTML templates.

Templates are parsed once at startup and rendered by name against the
shared page data.
"""

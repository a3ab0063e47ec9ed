"""View rendering module for HTML templates.

This module handles all HTML/template rendering logic, separate from API routers.
Views bind a controller to the partial resolver and render Jinja2 templates.
"""

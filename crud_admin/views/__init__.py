"""View rendering module for HTML templates.

This module handles template rendering and the helper object (``h``) that
every admin template receives for building URLs and formatting values.
"""

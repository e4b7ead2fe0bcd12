"""
Top-level package for the internship tracker.

Most code should import from submodules such as:
    intern_tracker.core
    intern_tracker.services
    intern_tracker.validation
"""

__all__: list[str] = []

"""todopanel - a task board for project to-dos linked to assets and team members."""

__version__ = "1.0.0"

"""Domain layer for todopanel.

Pure models and functions: tasks and their filtered view, team members,
the persisted board aggregate, and the settings snapshot. Nothing in this
package performs I/O.
"""

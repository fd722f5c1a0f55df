# AGPL-3.0 License

"""
PR-Labeler: apply pull request labels based on the paths a change touches.
"""

__version__ = "0.1.0"

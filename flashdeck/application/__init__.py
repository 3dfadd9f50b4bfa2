"""
Application layer.

Services that orchestrate domain entities through repository protocols.
"""

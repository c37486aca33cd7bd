"""Infrastructure module.

Settings, database engine/session handling and logging setup.
"""

"""
Portfolio Admin Modules
=======================

Flask blueprint modules for the admin: the dashboard gate and one editor per remote table.
"""

__all__ = ['dashboard', 'profile', 'projects', 'skills', 'public_api']

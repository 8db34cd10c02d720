"""
Configuration package for the hostel occupancy service.

Holds the environment-driven settings object shared by the database,
logging and security layers.
"""

from app.config.settings import Settings, get_settings, settings

__all__ = ['Settings', 'get_settings', 'settings']

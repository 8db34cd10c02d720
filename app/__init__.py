"""Hostel occupancy service."""

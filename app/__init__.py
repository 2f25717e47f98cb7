"""Notification hub application package."""

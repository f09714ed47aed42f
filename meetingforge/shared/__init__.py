"""Shared utilities used across MeetingForge packages."""

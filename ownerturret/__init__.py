"""Persistent turret ownership and shot-once state for the ownerturret namespace."""

"""Checkout and simulated backend services."""

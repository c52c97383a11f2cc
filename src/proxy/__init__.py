"""Thin proxies in front of the upstream weather/geocoding provider."""

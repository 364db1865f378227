"""Filesystem paths and console logging."""

"""Ports (structural protocols) the client depends on."""

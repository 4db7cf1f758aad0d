"""Peer-to-peer marketplace API."""

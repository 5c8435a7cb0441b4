"""Cipher-type detection."""

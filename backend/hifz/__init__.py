"""Hifz review scheduler backend."""

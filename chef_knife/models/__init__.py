"""Data models for chef_knife."""

from chef_knife.models.knife import KnifeConfig

__all__ = ["KnifeConfig"]

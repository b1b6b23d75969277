"""
ElfHead Shared Module
=====================

Configuration, logging, and console utilities shared by the ElfHead
command-line tool and its decoding engine.
"""

from shared.config import ToolkitConfig, get_config

__all__ = ["ToolkitConfig", "get_config"]

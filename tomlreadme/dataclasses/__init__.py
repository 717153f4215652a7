"""
dataclasses package
-------------------
Raw and canonical models for curated entry documents.

- RawEntry / RawConfig: deserialized shape, optional fields may be absent
- Entry / Config: canonical, fully defaulted, immutable
"""
from tomlreadme.dataclasses.entry import (
    Config,
    Entry,
    RawConfig,
    RawEntry,
    decode_config,
)

__all__ = ["Config", "Entry", "RawConfig", "RawEntry", "decode_config"]

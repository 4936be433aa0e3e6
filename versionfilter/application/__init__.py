"""
Application layer - use cases built on the version resolution domain.

This layer contains:
- Services that callers (sources, conditions, autodiscovery generators)
  use to resolve versions and generate follow-up filters

IMPORT RULES:
- CAN import from: domain, config, infrastructure
- CANNOT import from: api
"""

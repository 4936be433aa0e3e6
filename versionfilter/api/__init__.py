"""
API layer - configuration boundary for versionfilter.

This layer contains:
- Pydantic models that read raw user configuration (a "versionfilter"
  block in a manifest) and serialize resolution results

IMPORT RULES:
- CAN import from: domain, application
"""

"""
Core business logic modules for SkillMatch.

Submodules:
- matching: Compatibility scoring engine and match service
- exceptions: Error types raised by the directory and service layers
"""

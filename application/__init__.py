"""
Application Layer.

This package contains:
- ports/: Abstract repository interfaces (what the engine needs)
- use_cases/: Workflows orchestrating the engine over those ports
"""

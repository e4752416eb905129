"""
Core module for shared domain infrastructure.

This module contains:
- Domain exceptions and error kinds
- Value objects shared across modules
- The Result type returned by application handlers
"""

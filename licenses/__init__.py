"""
Licenses module - license key generation and verification.

This module handles:
- Domain and expiration date validation
- Salted core key generation and the checksum codec
- Hardware id lookup behind the HardwareIdProvider port
- The generate, verify and hardware_id management commands
"""

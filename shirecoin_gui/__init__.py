"""
Shirecoin GUI adapters: PyQt6 models and validators over shirecoin_core.

Requires the ``gui`` extra (PyQt6).
"""

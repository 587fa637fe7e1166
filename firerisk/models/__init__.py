"""
Models Package

Exports all models for easy importing.
"""

from firerisk.models.record import FireRiskRecord

__all__ = ['FireRiskRecord']

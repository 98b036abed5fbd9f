"""
Data models for Unacy.

Core models:
- Converter, BidirectionalConverter: conversion callables
- ConversionEdge: directed edge of the conversion graph
- ConversionPath: shortest path between two units
- UnitDefinition, UnitMetadata: descriptive data attached to units
"""

from unacy.models.converter import BidirectionalConverter, ConversionEdge, Converter
from unacy.models.path import ConversionPath
from unacy.models.unit import UnitDefinition, UnitMetadata

__all__ = [
    # Converter models
    "Converter",
    "BidirectionalConverter",
    "ConversionEdge",
    # Path models
    "ConversionPath",
    # Unit models
    "UnitDefinition",
    "UnitMetadata",
]

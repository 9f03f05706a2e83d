"""Visualization module for distance fields."""

from .visualizer import FieldVisualizer

__all__ = ['FieldVisualizer']

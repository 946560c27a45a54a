"""
Abstract base class for design code provisions.
Keeps the beam designers independent of the clause tables they read.
"""

from abc import ABC, abstractmethod


class DesignCode(ABC):
    """
    Abstract base class for structural design codes.

    Purpose:
    - Define interface for code-specific provisions
    - Centralize code clause references
    """

    @property
    @abstractmethod
    def code_name(self) -> str:
        """Return the code name/version."""
        pass

    @abstractmethod
    def get_limiting_moment_coefficient(self, fy: float) -> float:
        """Return Mu,lim / (fck·b·d²) for the steel grade."""
        pass

    @abstractmethod
    def get_minimum_tension_steel(self, b: float, d: float, fy: float) -> float:
        """Return minimum area of tension reinforcement (mm²)."""
        pass

    @abstractmethod
    def get_shear_strength_concrete(self, pt: float, fck: float) -> float:
        """Return design shear strength of concrete (τc)."""
        pass

    @abstractmethod
    def get_maximum_shear_stress(self, fck: float) -> float:
        """Return maximum shear stress limit (τc,max)."""
        pass

    @abstractmethod
    def get_span_depth_ratio(self) -> float:
        """Return basic span/effective depth ratio of a simply supported span."""
        pass

    @abstractmethod
    def get_modification_factor_tension(self, pt: float, fs: float) -> float:
        """Return modification factor kt for tension reinforcement."""
        pass

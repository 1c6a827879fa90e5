"""Package operators for executing installation, removal and update actions.

This module provides abstract and concrete implementations of package
operators for different package managers (APT, Flatpak, Snap).
"""

from labmaint.operators.apt import AptOperator
from labmaint.operators.base import Operator
from labmaint.operators.flatpak import FlatpakOperator
from labmaint.operators.snap import SnapOperator

__all__ = ["Operator", "AptOperator", "FlatpakOperator", "SnapOperator"]

"""Java language support — pmd."""

from lintmap.languages.java.detectors.pmd_adapter import PMDManager

__all__ = ["PMDManager"]

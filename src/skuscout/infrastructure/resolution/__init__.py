# 🧭 skuscout/infrastructure/resolution/__init__.py
"""
🧭 Контролер запиту: перебір ринків, проба, екстракція, діагностика.
"""

from __future__ import annotations

from .resolution_controller import EXTRACTION_FAILED, ResolutionController, SessionFactory

__all__ = ["EXTRACTION_FAILED", "ResolutionController", "SessionFactory"]

"""Derived asset builds: the Tailwind stylesheet and the Stimulus bundle."""

from __future__ import annotations

from .scripts import STIMULUS_PREAMBLE, ScriptBundler
from .stylesheet import TailwindRunner

__all__ = ["STIMULUS_PREAMBLE", "ScriptBundler", "TailwindRunner"]

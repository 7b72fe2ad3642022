"""Widgets of the launchbar shell."""

from .candidate_bar import CandidateBar
from .command_input import CommandInput

__all__ = ["CandidateBar", "CommandInput"]

"""
Type aliases for shfuncs.

This module provides centralized type definitions used throughout the package
to keep signatures consistent.

Type Aliases:
    ArgsList: List of string arguments
    ExitCode: Integer representing exit codes
    FlagMap: Mapping of accepted flag tokens to canonical flag names
    OptionMap: Mapping of accepted value-option tokens to canonical option names
    OptionValues: Mapping of canonical option names to their values
    FlagSet: Canonical names of the boolean flags that were present
"""

from typing import Dict, List, Set

ArgsList = List[str]
"""List of string arguments as received on the command line."""

ExitCode = int
"""Integer representing process exit codes (0 for success, non-zero for errors)."""

FlagMap = Dict[str, str]
"""Accepted boolean flag tokens mapped to a canonical name (e.g. {'-a': 'all', '--all': 'all'})."""

OptionMap = Dict[str, str]
"""Accepted value-option tokens mapped to a canonical name (e.g. {'-t': 'to', '--to': 'to'})."""

OptionValues = Dict[str, str]
"""Canonical value-option names mapped to the value given on the command line."""

FlagSet = Set[str]
"""Canonical names of the boolean flags that were present."""

"""
Configuration and limits for strictjson parsing.

This module defines security limits and configuration options for safe JSON parsing.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class SizeLimits:
    """Input and content size limits."""
    max_input_size: int = 10 * 1024 * 1024
    max_string_length: int = 1024 * 1024
    max_number_length: int = 100


@dataclass
class StructureLimits:
    """JSON structure complexity limits."""
    max_nesting_depth: int = 100
    max_object_keys: int = 10000
    max_array_items: int = 100000


SIZE_LIMIT_FIELDS = ("max_input_size", "max_string_length", "max_number_length")
STRUCTURE_LIMIT_FIELDS = ("max_nesting_depth", "max_object_keys", "max_array_items")


@dataclass
class ParseLimits:
    """Security limits for JSON parsing to prevent abuse."""

    size_limits: Optional[SizeLimits] = None
    structure_limits: Optional[StructureLimits] = None

    def __init__(
        self,
        *,
        size_limits: Optional[SizeLimits] = None,
        structure_limits: Optional[StructureLimits] = None,
        **limit_overrides: int,  # flat form, e.g. max_nesting_depth=5
    ):
        unknown = set(limit_overrides) - set(SIZE_LIMIT_FIELDS + STRUCTURE_LIMIT_FIELDS)
        if unknown:
            raise TypeError(f"Unknown limit(s): {', '.join(sorted(unknown))}")

        if size_limits is not None:
            self.size_limits = size_limits
        else:
            self.size_limits = SizeLimits(**{
                name: value for name, value in limit_overrides.items()
                if name in SIZE_LIMIT_FIELDS
            })

        if structure_limits is not None:
            self.structure_limits = structure_limits
        else:
            self.structure_limits = StructureLimits(**{
                name: value for name, value in limit_overrides.items()
                if name in STRUCTURE_LIMIT_FIELDS
            })

        if self.size_limits.max_input_size <= 0:
            raise ValueError("max_input_size must be positive")
        if self.structure_limits.max_nesting_depth <= 0:
            raise ValueError("max_nesting_depth must be positive")

    @property
    def max_input_size(self) -> int:
        """Maximum input size in characters."""
        assert self.size_limits is not None
        return self.size_limits.max_input_size

    @property
    def max_string_length(self) -> int:
        """Maximum length for individual strings."""
        assert self.size_limits is not None
        return self.size_limits.max_string_length

    @property
    def max_number_length(self) -> int:
        """Maximum length for number literals."""
        assert self.size_limits is not None
        return self.size_limits.max_number_length

    @property
    def max_nesting_depth(self) -> int:
        """Maximum nesting depth for JSON structures."""
        assert self.structure_limits is not None
        return self.structure_limits.max_nesting_depth

    @property
    def max_object_keys(self) -> int:
        """Maximum number of keys in an object."""
        assert self.structure_limits is not None
        return self.structure_limits.max_object_keys

    @property
    def max_array_items(self) -> int:
        """Maximum number of items in an array."""
        assert self.structure_limits is not None
        return self.structure_limits.max_array_items


@dataclass
class ParsingBehavior:
    """Core parsing behavior settings."""
    allow_trailing_tokens: bool = False


@dataclass
class ErrorReporting:
    """Error reporting and context settings."""
    include_position: bool = True
    include_context: bool = True
    max_error_context: int = 50


@dataclass
class ParseConfig:
    """Configuration options for strictjson parsing."""

    limits: Optional[ParseLimits] = None
    behavior: Optional[ParsingBehavior] = None
    error_reporting: Optional[ErrorReporting] = None

    def __init__(
        self,
        *,
        limits: Optional[ParseLimits] = None,
        behavior: Optional[ParsingBehavior] = None,
        error_reporting: Optional[ErrorReporting] = None,
        **config_options: Any,
    ):
        self.limits = limits or ParseLimits()

        if behavior is not None:
            self.behavior = behavior
        else:
            self.behavior = ParsingBehavior(
                allow_trailing_tokens=config_options.get('allow_trailing_tokens', False),
            )

        if error_reporting is not None:
            self.error_reporting = error_reporting
        else:
            self.error_reporting = ErrorReporting(
                include_position=config_options.get('include_position', True),
                include_context=config_options.get('include_context', True),
                max_error_context=config_options.get('max_error_context', 50),
            )

    @property
    def allow_trailing_tokens(self) -> bool:
        """Whether loads() accepts tokens after the first complete value."""
        assert self.behavior is not None
        return self.behavior.allow_trailing_tokens

    @allow_trailing_tokens.setter
    def allow_trailing_tokens(self, value: bool) -> None:
        assert self.behavior is not None
        self.behavior.allow_trailing_tokens = value

    @property
    def include_position(self) -> bool:
        """Whether to attach an error reporter with position context."""
        assert self.error_reporting is not None
        return self.error_reporting.include_position

    @include_position.setter
    def include_position(self, value: bool) -> None:
        assert self.error_reporting is not None
        self.error_reporting.include_position = value

    @property
    def include_context(self) -> bool:
        """Whether to include source context in error messages."""
        assert self.error_reporting is not None
        return self.error_reporting.include_context

    @include_context.setter
    def include_context(self, value: bool) -> None:
        assert self.error_reporting is not None
        self.error_reporting.include_context = value

    @property
    def max_error_context(self) -> int:
        """Maximum characters of context to include in errors."""
        assert self.error_reporting is not None
        return self.error_reporting.max_error_context

    @max_error_context.setter
    def max_error_context(self, value: int) -> None:
        assert self.error_reporting is not None
        self.error_reporting.max_error_context = value

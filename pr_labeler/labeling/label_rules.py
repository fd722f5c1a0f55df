# AGPL-3.0 License

"""
Label rule data structures and validation.
"""

from dataclasses import dataclass
from typing import Any, Iterator, Mapping


class ConfigurationError(ValueError):
    """Raised when a label configuration is malformed."""


@dataclass(frozen=True)
class LabelRule:
    """
    A single label together with the path prefixes that trigger it.

    Attributes:
        label: Label name to apply
        patterns: Literal path prefixes, in configuration order

    Raises:
        ConfigurationError: If the label or any pattern is empty or not a string,
            or if the pattern list is empty or not a list/tuple
    """
    label: str
    patterns: tuple[str, ...]

    def __post_init__(self):
        if not isinstance(self.label, str) or not self.label:
            raise ConfigurationError(f"Label names must be non-empty strings, got {self.label!r}")

        # A bare string is a sequence too, but never a valid pattern list
        if not isinstance(self.patterns, (list, tuple)):
            raise ConfigurationError(
                f"Patterns for label '{self.label}' must be a list of strings, "
                f"got {type(self.patterns).__name__}"
            )
        if not self.patterns:
            raise ConfigurationError(f"Label '{self.label}' has an empty pattern list")

        for pattern in self.patterns:
            if not isinstance(pattern, str):
                raise ConfigurationError(
                    f"Patterns for label '{self.label}' must be strings, got {pattern!r}"
                )
            if not pattern:
                raise ConfigurationError(f"Label '{self.label}' contains an empty pattern")

        # Frozen: copy so later changes to the caller's list do not leak in
        object.__setattr__(self, "patterns", tuple(self.patterns))


@dataclass(frozen=True)
class LabelRules:
    """
    Validated, immutable collection of label rules.

    Usually built from a decoded configuration mapping via `from_mapping`.
    Patterns are literal prefixes; no glob or regex expansion is done.

    Raises:
        ConfigurationError: If an entry is not a LabelRule or a label appears twice
    """
    rules: tuple[LabelRule, ...] = ()

    def __post_init__(self):
        if not isinstance(self.rules, (list, tuple)):
            raise ConfigurationError(
                f"Label rules must be a list of LabelRule, got {type(self.rules).__name__}"
            )

        seen = set()
        for rule in self.rules:
            if not isinstance(rule, LabelRule):
                raise ConfigurationError(f"Label rules must be LabelRule instances, got {rule!r}")
            if rule.label in seen:
                raise ConfigurationError(f"Duplicate label '{rule.label}' in label configuration")
            seen.add(rule.label)

        object.__setattr__(self, "rules", tuple(self.rules))

    @classmethod
    def from_mapping(cls, mapping: Any) -> "LabelRules":
        """
        Validate a decoded label -> patterns mapping and build the rules.

        Args:
            mapping: Mapping of label name to a list of path prefixes

        Returns:
            LabelRules instance

        Raises:
            ConfigurationError: If the mapping, a label, a pattern list or a pattern is invalid
        """
        if not isinstance(mapping, Mapping):
            raise ConfigurationError(
                f"Label configuration must be a mapping of label to path patterns, "
                f"got {type(mapping).__name__}"
            )

        return cls(rules=tuple(
            LabelRule(label=label, patterns=patterns)
            for label, patterns in mapping.items()
        ))

    @property
    def labels(self) -> list[str]:
        """Label names in configuration order."""
        return [rule.label for rule in self.rules]

    def __iter__(self) -> Iterator[LabelRule]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

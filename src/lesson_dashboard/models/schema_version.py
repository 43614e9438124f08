"""
Schema versioning for exported dashboard snapshots.

Exported JSON files are wrapped in a versioned envelope so that later
readers can tell which bucket layout they are looking at.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class SchemaVersion(Enum):
    """
    Export schema versions.

    Versions:
        V1_0: Four buckets (today, available, upcoming, historic) of lesson records
    """

    V1_0 = "1.0"

    @classmethod
    def latest(cls) -> 'SchemaVersion':
        """Get the version written by the current code."""
        return cls.V1_0


@dataclass
class VersionedData:
    """
    Data with version information.

    Attributes:
        schema_version: Version identifier
        data: Actual data content

    Examples:
        >>> versioned = VersionedData(
        ...     schema_version=SchemaVersion.V1_0.value,
        ...     data={"buckets": {"today": [], "available": []}}
        ... )
    """

    schema_version: str
    data: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary format."""
        return {
            "schema_version": self.schema_version,
            "data": self.data
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'VersionedData':
        """
        Create instance from dictionary.

        Missing versions are read as V1_0.
        """
        return cls(
            schema_version=d.get("schema_version", SchemaVersion.V1_0.value),
            data=d.get("data", {})
        )

    @property
    def version_enum(self) -> SchemaVersion:
        """Get schema version as enum."""
        return SchemaVersion(self.schema_version)

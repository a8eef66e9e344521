"""Core data models shared across topowrite components."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class Item:
    """A named document unit with its input file and dependency names."""

    name: str
    input_path: str = ""
    dependencies: List[str] = field(default_factory=list)


@dataclass
class DocumentMetadata:
    """Files framing the sorted items in the emitted document."""

    header: str = ""
    introduction: Optional[str] = None
    conclusion: Optional[str] = None


@dataclass
class BuildResult:
    """Output of the item graph builder.

    ``items`` keeps the first-seen order of the configuration, which is the
    outer visiting order of the sorter.
    """

    metadata: DocumentMetadata
    items: Dict[str, Item] = field(default_factory=dict)

"""Example project file written by ``topowrite --template``."""

from __future__ import annotations

from pathlib import Path

TEMPLATE = """\
{
	"header" : "your latex settings to place before begin{document}",
	"introduction" : "the input file to place as introduction",
	"conclusion" : "the input file to place as conclusion",

	"a" : {
		"depends" : ["b", "c"],
		"input" : "what input file describes a"
	},
	"b" : {
		"depends" : [],
		"input" : "what input file describes b"
	},
	"c" : {
		"depends" : ["b"],
		"input" : "what input file describes c"
	}
}
"""


def write_template(path: Path) -> Path:
    """Write the example configuration to ``path``, replacing any existing file."""
    target = Path(path).expanduser()
    target.write_text(TEMPLATE, encoding="utf-8")
    return target


__all__ = ["TEMPLATE", "write_template"]

"""LaTeX document emission for sorted items."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path
from typing import Iterable, List

from .models import DocumentMetadata, Item

ENCODING = "utf-8"
ERRORS = "surrogateescape"


class DocumentEmitter:
    """Frames sorted items with the header, introduction and conclusion."""

    BEGIN = "\\begin{document}"
    END = "\\end{document}"
    INPUT_FMT = "\\input{{{path}}}"

    def render(
        self, metadata: DocumentMetadata, items: Iterable[Item], header_text: str
    ) -> str:
        """Return the document text for ``items`` in the given order."""
        # Only line breaks are normalised; form feeds and other separators stay verbatim.
        header_lines = header_text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
        if header_lines[-1] == "":
            header_lines.pop()
        lines: List[str] = [line + "\n" for line in header_lines]
        lines.append("\n")
        lines.append(self.BEGIN + "\n")
        if metadata.introduction:
            lines.append(self.input_directive(metadata.introduction))
        for item in items:
            lines.append(self.input_directive(item.input_path))
        if metadata.conclusion:
            lines.append(self.input_directive(metadata.conclusion))
        lines.append(self.END + "\n")
        return "".join(lines)

    def input_directive(self, path: str) -> str:
        return self.INPUT_FMT.format(path=path) + "\n"

    def read_header(self, metadata: DocumentMetadata) -> str:
        """Read the header file named by ``metadata``; relative paths resolve against the CWD.

        Bytes that are not UTF-8 are kept as surrogate escapes so a Latin-1
        header is copied byte for byte by :meth:`write`.
        """
        if not metadata.header:
            raise ValueError("You must specify a header.")
        with open(
            metadata.header, "r", encoding=ENCODING, errors=ERRORS, newline=None
        ) as handle:
            return handle.read()

    def emit(
        self, metadata: DocumentMetadata, items: Iterable[Item], output_path: Path
    ) -> Path:
        """Render the document and write it to ``output_path``."""
        text = self.render(metadata, items, self.read_header(metadata))
        return self.write(output_path, text)

    def write(self, output_path: Path, text: str) -> Path:
        """Write ``text`` to a temp file beside ``output_path`` and rename it into place."""
        target = Path(output_path)
        fd, tmp_path = tempfile.mkstemp(
            dir=target.parent,
            prefix=f".{target.name}.",
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "w", encoding=ENCODING, errors=ERRORS, newline="\n") as handle:
                handle.write(text)
            os.chmod(tmp_path, _output_mode(target))
            os.replace(tmp_path, target)
        except BaseException:
            # The partial temp file is never renamed over the target.
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise
        return target


def _output_mode(target: Path) -> int:
    """Mode for the rendered file: keep an existing target's mode, else honour the umask."""
    try:
        return stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        pass
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


__all__ = ["DocumentEmitter"]

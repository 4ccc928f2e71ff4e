"""Write serialized documents as JSON or YAML text."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING

import yaml

if TYPE_CHECKING:
    from dbc_to_json.transform.serializer import Document

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("json", "yaml")


class WriteFailure(Exception):
    """The document could not be written to its destination."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        """Initialize WriteFailure.

        Args:
        ----
            message: Error message, usually the underlying OS error.
            path: Destination path.

        """
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


class DocumentWriter:
    """Write a document to text, pretty-printed.

    Usage:
        writer = DocumentWriter()
        writer.write(result.document, Path("output.json"))

    Or for in-memory conversion:
        text = writer.dumps(result.document)
    """

    def __init__(
        self,
        indent: int = 4,
        output_format: str = "json",
        ensure_ascii: bool = False,
    ) -> None:
        """Initialize the document writer.

        Args:
        ----
            indent: Number of spaces per nesting level.
            output_format: "json" or "yaml".
            ensure_ascii: Escape non-ASCII characters in JSON output.

        Raises:
        ------
            ValueError: If the output format is unknown.

        """
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format: {output_format}. "
                f"Supported: {', '.join(OUTPUT_FORMATS)}"
            )
        self._indent = indent
        self._output_format = output_format
        self._ensure_ascii = ensure_ascii

    @property
    def output_format(self) -> str:
        """The configured output format."""
        return self._output_format

    def dumps(self, document: Document) -> str:
        """Render a document as text.

        Args:
        ----
            document: The document to render.

        Returns:
        -------
            The document text, ending with a newline. Key order is preserved.

        """
        if self._output_format == "yaml":
            return yaml.safe_dump(
                document,
                indent=self._indent or None,
                sort_keys=False,
                allow_unicode=not self._ensure_ascii,
                default_flow_style=False,
            )

        return json.dumps(document, indent=self._indent, ensure_ascii=self._ensure_ascii) + "\n"

    def write(self, document: Document, output_path: Path | str) -> None:
        """Write a document to a file.

        Args:
        ----
            document: The document to write.
            output_path: Output file path. Parent directories will be created.

        Raises:
        ------
            WriteFailure: If the file cannot be written.

        """
        text = self.dumps(document)
        path = Path(output_path)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            raise WriteFailure(e.strerror or str(e), output_path) from e

        logger.info("Wrote %d characters to %s", len(text), path)

"""
HTML page assembly and output.

Concatenates the document header (with the generated stylesheet), one
fragment per input row in input order, and the closing tags. Fragments
are streamed to disk as they are produced.
"""

import html
import logging
from pathlib import Path
from typing import Iterable, Iterator, Union

logger = logging.getLogger(__name__)


HTML_HEADER = "<html><head><title>{title}</title>{stylesheet}</head><body>"
HTML_FOOTER = "</body></html>"


def assemble_page(
    stylesheet: str,
    fragments: Iterable[str],
    title: str = "",
) -> Iterator[str]:
    """
    Yield the page as a sequence of text chunks.

    Every fragment is preceded by a newline for readability of the
    generated source.

    Args:
        stylesheet: Complete <style> element
        fragments: Rendered row fragments, in input order
        title: Page title (escaped)

    Yields:
        Header, one chunk per fragment, footer
    """
    yield HTML_HEADER.format(title=html.escape(title), stylesheet=stylesheet)
    for fragment in fragments:
        yield "\n" + fragment
    yield HTML_FOOTER


def write_page(
    output_path: Union[str, Path],
    chunks: Iterable[str],
    encoding: str = "utf-8",
) -> Path:
    """
    Write page chunks to a file.

    Args:
        output_path: Destination file; parent directories are created
        chunks: Text chunks from assemble_page
        encoding: Output encoding

    Returns:
        The path written
    """
    out_path = Path(output_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    with open(out_path, "w", encoding=encoding) as fout:
        for chunk in chunks:
            fout.write(chunk)

    logger.info("Saved page: %s", out_path)
    return out_path

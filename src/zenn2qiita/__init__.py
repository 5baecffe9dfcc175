"""zenn2qiita — rewrite Zenn article frontmatter into Qiita CLI frontmatter."""

from __future__ import annotations

from zenn2qiita.converter import ConverterOptions, FrontmatterConverter, convert_frontmatter
from zenn2qiita.errors import MalformedDocumentError, Zenn2QiitaError

__version__ = "0.1.0"

__all__ = [
    "ConverterOptions",
    "FrontmatterConverter",
    "MalformedDocumentError",
    "Zenn2QiitaError",
    "__version__",
    "convert_frontmatter",
]

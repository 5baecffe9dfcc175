"""FrontmatterConverter — Zenn article text in, Qiita article text out.

Two stages: configure once (output path, prior-state lookup, clock), then
apply to any number of input texts.

Pipeline per call: PARSE → LOOKUP → MAP → RENDER

The converter holds no mutable state, so one instance may be shared
across threads. The only I/O is the optional prior-output read done by
the lookup.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from zenn2qiita.config.logging import configure_logging
from zenn2qiita.domain.document import Document, parse_document, render_document
from zenn2qiita.domain.mapping import (
    Timespec,
    format_timestamp,
    load_source,
    map_frontmatter,
    utc_now,
)
from zenn2qiita.domain.prior import NullPriorStateLookup, PriorState, PriorStateLookup
from zenn2qiita.errors import MalformedDocumentError
from zenn2qiita.infrastructure.filesystem import FilePriorStateLookup

if TYPE_CHECKING:
    from zenn2qiita.config.settings import Zenn2QiitaSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConverterOptions:
    """Everything captured in the configure stage.

    Attributes:
        output_path: Identity of the previously generated output, if any.
            The lookup is only consulted when this is set.
        lookup: Source of prior ``id`` / ``organization_url_name`` values.
        clock: Returns the time stamped into ``updated_at``.
        timespec: Precision of the ``updated_at`` timestamp.
    """

    output_path: str | Path | None = None
    lookup: PriorStateLookup = field(default_factory=NullPriorStateLookup)
    clock: Callable[[], datetime] = utc_now
    timespec: Timespec = "milliseconds"


class FrontmatterConverter:
    """Single-purpose transformation object built from :class:`ConverterOptions`.

    Usage::

        convert = FrontmatterConverter(ConverterOptions(output_path=out))
        qiita_text = convert(zenn_text)
    """

    def __init__(self, options: ConverterOptions | None = None) -> None:
        self._options = options or ConverterOptions()

    @property
    def options(self) -> ConverterOptions:
        return self._options

    @classmethod
    def from_settings(
        cls,
        settings: Zenn2QiitaSettings,
        output_path: str | Path | None = None,
    ) -> FrontmatterConverter:
        """Build a converter backed by the filesystem lookup.

        Also routes the ``zenn2qiita`` loggers according to the
        ``verbose`` and ``log_json`` settings.
        """
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        return cls(
            ConverterOptions(
                output_path=output_path,
                lookup=FilePriorStateLookup(encoding=settings.convert.encoding),
                timespec=settings.convert.timespec,
            )
        )

    def convert(self, input_text: str) -> str:
        """Convert one Zenn document to a Qiita document.

        Raises:
            MalformedDocumentError: If the input (or the prior output) has
                no well-formed frontmatter.
            OSError: If the prior output exists but cannot be read.
        """
        opts = self._options

        # ── PARSE ────────────────────────────────────────────────
        try:
            document = parse_document(input_text)
            source = load_source(document.frontmatter)
        except MalformedDocumentError as exc:
            logger.debug("Rejected input document: %s", exc.reason)
            raise

        # ── LOOKUP ───────────────────────────────────────────────
        prior = PriorState()
        if opts.output_path is not None:
            try:
                prior = opts.lookup.get(opts.output_path)
            except (OSError, MalformedDocumentError):
                logger.debug("Prior output lookup failed for %s", opts.output_path, exc_info=True)
                raise

        # ── MAP ──────────────────────────────────────────────────
        updated_at = format_timestamp(opts.clock(), timespec=opts.timespec)
        target = map_frontmatter(source, prior=prior, updated_at=updated_at)

        # ── RENDER ───────────────────────────────────────────────
        logger.debug("Converted frontmatter (updated_at=%s, id=%r)", updated_at, prior.id)
        return render_document(Document(frontmatter=target.to_mapping(), body=document.body))

    __call__ = convert


def convert_frontmatter(
    output_path: str | Path | None = None,
    *,
    lookup: PriorStateLookup | None = None,
    clock: Callable[[], datetime] | None = None,
) -> FrontmatterConverter:
    """Configure a converter; call the result with the input text.

    ``convert_frontmatter(out)(text)`` recovers ``id`` and
    ``organization_url_name`` from the file at *out* when it exists. Pass
    *lookup* to recover them from somewhere other than the filesystem.
    """
    return FrontmatterConverter(
        ConverterOptions(
            output_path=output_path,
            lookup=lookup if lookup is not None else FilePriorStateLookup(),
            clock=clock if clock is not None else utc_now,
        )
    )

"""
Batch processor for row-oriented callers.

Applies parse_uri, extract_uri and parse_domain over a Polars DataFrame column.
"""

import logging
from typing import Optional

import polars as pl

from uri_utils.core import parse_uri
from uri_utils.exceptions import InvalidURI
from uri_utils.extraction import URIExtractor
from uri_utils.models import ExtractionResult, ParsedURI
from uri_utils.normalization import URINormalizer

logger = logging.getLogger(__name__)

PARSE_SCHEMA = {
    "scheme": pl.String,
    "user_info": pl.String,
    "host_text": pl.String,
    "host_type": pl.String,
    "ipv4": pl.Binary,
    "ipv6": pl.Binary,
    "ip_future": pl.String,
    "port_text": pl.String,
    "path": pl.List(pl.String),
    "absolute_path": pl.Boolean,
    "query": pl.String,
    "fragment": pl.String,
    "key": pl.List(pl.String),
    "value": pl.List(pl.String),
    "is_valid": pl.Boolean,
}

EXTRACT_SCHEMA = {
    "row_index": pl.Int64,
    "scheme": pl.String,
    "user_info": pl.String,
    "host_text": pl.String,
    "ipv4": pl.Binary,
    "ipv6": pl.Binary,
    "ip_future": pl.String,
    "port_text": pl.String,
    "path": pl.String,
    "query": pl.String,
    "fragment": pl.String,
    "absolute_path": pl.Boolean,
    "uri": pl.String,
}


class URIBatchProcessor:
    """
    Run the URI entry points over DataFrame columns.

    parse_batch keeps one output row per input row (invalid inputs get nulls
    and is_valid=False). extract_batch emits one row per URI found, tagged
    with the index of the source row.
    """

    def __init__(
        self,
        normalizer: Optional[URINormalizer] = None,
        extractor: Optional[URIExtractor] = None,
    ):
        """
        Initialize batch processor.

        Args:
            normalizer: URI normalizer instance (creates new if None)
            extractor: URI extractor instance (creates new if None)
        """
        self.normalizer = normalizer or URINormalizer()
        self.extractor = extractor or URIExtractor(normalizer=self.normalizer)

    def parse_batch(
        self,
        df: pl.DataFrame,
        column: str = "uri",
        normalize: bool = False,
        parse_query: bool = False,
    ) -> pl.DataFrame:
        """
        Parse every value of a column.

        Args:
            df: Input DataFrame
            column: Name of the column holding URIs
            normalize: Normalize parsed components
            parse_query: Decompose queries into key/value lists

        Returns:
            Input DataFrame with the PARSE_SCHEMA columns appended
        """
        records = []
        invalid = 0

        for raw_uri in df.get_column(column).to_list():
            try:
                if raw_uri is None:
                    raise InvalidURI("", "null input")
                parsed = parse_uri(
                    raw_uri,
                    normalize=normalize,
                    parse_query=parse_query,
                    normalizer=self.normalizer,
                )
            except InvalidURI as e:
                logger.warning(f"Failed to parse URI {raw_uri!r}: {e.reason}")
                invalid += 1
                records.append(self._invalid_record())
                continue

            records.append(self._parsed_record(parsed))

        logger.info(
            "Parsed %d values from column '%s' (%d invalid)",
            len(records),
            column,
            invalid,
        )

        parsed_df = (
            pl.from_dicts(records, schema=PARSE_SCHEMA)
            if records
            else pl.DataFrame(schema=PARSE_SCHEMA)
        )
        return df.hstack(parsed_df)

    def extract_batch(
        self, df: pl.DataFrame, column: str = "text", normalize: bool = False
    ) -> pl.DataFrame:
        """
        Extract URIs from every value of a column.

        Args:
            df: Input DataFrame
            column: Name of the column holding free text
            normalize: Normalize extracted components (the "uri" column stays verbatim)

        Returns:
            DataFrame with EXTRACT_SCHEMA, one row per URI found
        """
        records = []

        for row_index, text in enumerate(df.get_column(column).to_list()):
            if text is None:
                continue
            result: ExtractionResult = self.extractor.extract(text, normalize=normalize)
            for entry in result.entries():
                entry["row_index"] = row_index
                records.append(entry)

        logger.info(
            "Extracted %d URIs from %d rows of column '%s'",
            len(records),
            df.height,
            column,
        )

        if not records:
            return pl.DataFrame(schema=EXTRACT_SCHEMA)
        return pl.from_dicts(records, schema=EXTRACT_SCHEMA)

    def domain_batch(
        self, df: pl.DataFrame, column: str = "domain", alias: str = "labels"
    ) -> pl.DataFrame:
        """Append a List[String] column with the dot-separated labels of column."""
        return df.with_columns(pl.col(column).str.split(".").alias(alias))

    def _parsed_record(self, parsed: ParsedURI) -> dict:
        return {
            "scheme": parsed.scheme,
            "user_info": parsed.user_info,
            "host_text": parsed.host_text,
            "host_type": parsed.host_type,
            "ipv4": parsed.ipv4,
            "ipv6": parsed.ipv6,
            "ip_future": parsed.ip_future,
            "port_text": parsed.port_text,
            "path": list(parsed.path),
            "absolute_path": parsed.absolute_path,
            "query": parsed.query,
            "fragment": parsed.fragment,
            "key": list(parsed.keys) if parsed.keys is not None else None,
            "value": list(parsed.values) if parsed.values is not None else None,
            "is_valid": True,
        }

    def _invalid_record(self) -> dict:
        record = {name: None for name in PARSE_SCHEMA}
        record["is_valid"] = False
        return record

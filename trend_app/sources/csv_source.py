"""Price source reading a downloaded daily history CSV file."""

import csv
from pathlib import Path
from typing import Any

from ..data.parsers import ParseError, parse_price_text
from ..errors import MalformedSourceError, SourceUnavailableError
from .base import BasePriceSource


class CsvPriceSource(BasePriceSource):
    """
    Reads ``<data_dir>/<ticker><file_suffix>`` and returns its close column.

    The header row must contain a column named exactly ``close_column``.
    Rows are returned in file order; blank lines are skipped and any other
    row without a numeric close price is an error.
    """

    name = "csv"

    def __init__(self, data_dir: str = ".", file_suffix: str = ".csv",
                 close_column: str = "Close", delimiter: str = ",",
                 orientation: str = "oldest_first", encoding: str = "utf-8-sig"):
        super().__init__(orientation)
        self.data_dir = Path(data_dir)
        self.file_suffix = file_suffix
        self.close_column = close_column
        self.delimiter = delimiter
        self.encoding = encoding

    @classmethod
    def from_config(cls, params: dict[str, Any]) -> "CsvPriceSource":
        """Create a source from the ``csv`` configuration section."""
        return cls(
            data_dir=params.get("data_dir", "."),
            file_suffix=params.get("file_suffix", ".csv"),
            close_column=params.get("close_column", "Close"),
            delimiter=params.get("delimiter", ","),
            orientation=params.get("orientation", "oldest_first"),
            encoding=params.get("encoding", "utf-8-sig"),
        )

    def path_for(self, ticker: str) -> Path:
        return self.data_dir / f"{ticker}{self.file_suffix}"

    def load_values(self, ticker: str) -> list[float]:
        path = self.path_for(ticker)

        try:
            with open(path, newline="", encoding=self.encoding) as f:
                return self._read_close_column(csv.reader(f, delimiter=self.delimiter), path)
        except OSError as e:
            self.logger.error("Failed to open price file", path=str(path), error=str(e))
            raise SourceUnavailableError(
                f"Cannot read price file {path}: {e.strerror or e}",
                target=str(path),
                source=self.name
            ) from e
        except (UnicodeDecodeError, csv.Error) as e:
            self.logger.error("Price file is not readable CSV", path=str(path), error=str(e))
            raise MalformedSourceError(
                f"Price file {path} is not valid {self.encoding} CSV: {e}",
                source=self.name
            ) from e

    def _read_close_column(self, reader, path: Path) -> list[float]:
        header = next(reader, None)
        if header is None:
            raise MalformedSourceError(f"Price file {path} is empty", source=self.name, line_number=1)

        columns = [column.strip() for column in header]
        if self.close_column not in columns:
            raise MalformedSourceError(
                f"Price file {path} has no '{self.close_column}' column (found: {', '.join(columns)})",
                source=self.name,
                line_number=1,
                raw_data=self.delimiter.join(header)
            )
        index = columns.index(self.close_column)

        prices = []
        for row in reader:
            if not any(cell.strip() for cell in row):
                continue

            if len(row) <= index:
                raise MalformedSourceError(
                    f"Line {reader.line_num} of {path} has no '{self.close_column}' value",
                    source=self.name,
                    line_number=reader.line_num,
                    raw_data=self.delimiter.join(row)
                )

            try:
                prices.append(parse_price_text(row[index]))
            except ParseError as e:
                raise MalformedSourceError(
                    f"Line {reader.line_num} of {path}: {e}",
                    source=self.name,
                    line_number=reader.line_num,
                    raw_data=self.delimiter.join(row)
                ) from e

        self.logger.info("Read price file", path=str(path), rows=len(prices))
        return prices

"""A table stored in a single CSV file, with a simple transaction model.

The first record of the file is the header.  ``begin`` loads the file into
memory, record operations change the loaded copy, and ``commit`` writes it
back (``rollback`` discards it).  The object is also a context manager
that commits on success and rolls back on error.
"""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from .logger import Severity, log


class CsvTableError(Exception):
    """Raised when a CSV table operation fails."""


def _read_csv(path: Path) -> List[List[str]]:
    try:
        with path.open(newline="", encoding="utf-8", errors="surrogateescape") as f:
            return list(csv.reader(f))
    except (OSError, csv.Error) as exc:
        raise CsvTableError(f"Failed to parse CSV file '{path}': {exc}") from exc


def _write_csv(path: Path, rows: Iterable[Sequence[str]]) -> None:
    try:
        with path.open(
            "w", newline="", encoding="utf-8", errors="surrogateescape"
        ) as f:
            csv.writer(f).writerows(rows)
    except (OSError, csv.Error) as exc:
        raise CsvTableError(f"Failed to write CSV file '{path}': {exc}") from exc


def _record_repr(record: Sequence[str]) -> str:
    out = io.StringIO()
    csv.writer(out, lineterminator="").writerow(record)
    return out.getvalue()


class CsvTable:
    """A table backed by the CSV file ``filename``."""

    def __init__(self, filename: Union[str, Path]) -> None:
        self.filename = Path(filename)
        self._table: Optional[List[List[str]]] = None

    def __enter__(self) -> "CsvTable":
        self.begin()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None:
            self.commit()
        else:
            self.rollback()
        return False

    def _loaded(self) -> List[List[str]]:
        if self._table is None:
            raise CsvTableError(
                f"No transaction in progress for '{self.filename}'"
            )
        if not self._table:
            raise CsvTableError(f"Table in '{self.filename}' has no header")
        return self._table

    def _find(self, primary_values: Sequence[str]) -> Optional[int]:
        values = list(primary_values)
        table = self._loaded()
        for index, record in enumerate(table[1:], start=1):
            if record[: len(values)] == values:
                return index
        return None

    def create_table(
        self,
        table_name: str,
        primary_columns: Sequence[str],
        subsidiary_columns: Sequence[str],
    ) -> None:
        """Create the file with a header row, unless it already exists."""
        if self.filename.is_file():
            log(
                Severity.DEBUG,
                f"Skipped creating CSV file '{self.filename}': "
                f'Table "{table_name}" already exists',
            )
            return
        header = [*primary_columns, *subsidiary_columns]
        _write_csv(self.filename, [header])
        log(Severity.DEBUG, f"Created table with header: \n\t{_record_repr(header)}")

    def truncate_table(self, table_name: str, column: str, value: str) -> None:
        """Remove every record whose ``column`` field equals ``value``."""
        table = self._loaded()
        header = table[0]
        try:
            position = header.index(column)
        except ValueError:
            raise CsvTableError(
                f'Missing field name "{column}" for unique host identifier '
                f"in table header of table '{table_name}'"
            ) from None

        kept = [header]
        for number, record in enumerate(table[1:], start=1):
            if position < len(record) and record[position] == value:
                log(
                    Severity.DEBUG,
                    f'Deleting record {number} from table "{table_name}": '
                    f"{_record_repr(record)}",
                )
            else:
                kept.append(record)
        table[:] = kept

    def get_table(
        self, table_name: str, columns: Optional[Sequence[str]] = None
    ) -> List[List[str]]:
        """Return all records of the file, header first."""
        table = _read_csv(self.filename)
        log(Severity.DEBUG, f"Loaded table \"{table_name}\" from '{self.filename}'")
        return table

    def begin(self) -> None:
        """Load the file into memory to start a transaction."""
        self._table = _read_csv(self.filename)
        log(Severity.DEBUG, f"Loaded table from '{self.filename}'")

    def commit(self) -> None:
        """Write the loaded table back to the file and end the transaction."""
        if self._table is None:
            raise CsvTableError(f"No transaction in progress for '{self.filename}'")
        try:
            _write_csv(self.filename, self._table)
        finally:
            self._table = None
        log(Severity.DEBUG, f"Wrote table to '{self.filename}'")

    def rollback(self) -> None:
        """Discard the loaded table and end the transaction."""
        self._table = None
        log(Severity.DEBUG, "Destroyed table")

    def insert_record(
        self, table_name: str, columns: Sequence[str], values: Sequence[str]
    ) -> None:
        """Append a record holding ``values``."""
        table = self._loaded()
        record = list(values)
        table.append(record)
        log(
            Severity.DEBUG,
            f"Inserted record {len(table) - 1}: '{_record_repr(record)}'",
        )

    def delete_record(
        self,
        table_name: str,
        primary_columns: Sequence[str],
        primary_values: Sequence[str],
    ) -> None:
        """Remove the first record whose leading fields equal ``primary_values``."""
        index = self._find(primary_values)
        if index is None:
            raise CsvTableError(
                f"Failed to delete record from table \"{table_name}\": "
                f"No record with primary fields '{_record_repr(primary_values)}'"
            )
        removed = self._loaded().pop(index)
        log(Severity.DEBUG, f"Deleted record {index + 1}: '{_record_repr(removed)}'")

    def update_record(
        self,
        table_name: str,
        primary_columns: Sequence[str],
        primary_values: Sequence[str],
        subsidiary_columns: Sequence[str],
        subsidiary_values: Sequence[str],
    ) -> None:
        """Replace the fields following the primary fields of the matching
        record with ``subsidiary_values``."""
        index = self._find(primary_values)
        if index is None:
            raise CsvTableError(
                f"Failed to update record in table \"{table_name}\": "
                f"No record with primary fields '{_record_repr(primary_values)}'"
            )
        record = self._loaded()[index]
        start = len(primary_values)
        values = list(subsidiary_values)
        if start + len(values) > len(record):
            raise CsvTableError(
                f"Failed to update record {index + 1} in table \"{table_name}\": "
                f"Record has only {len(record)} fields"
            )
        record[start : start + len(values)] = values
        log(Severity.DEBUG, f"Updated record {index + 1}: '{_record_repr(record)}'")
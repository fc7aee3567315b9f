# SPDX-License-Identifier: MIT

import csv
from pathlib import Path
from typing import Iterator, Optional

from planning.exception import PlanningNotFoundError, PlanningSourceError
from planning.logger import get_logger
from planning.model.planning_file import PlanningFile
from planning.model.task import RawRecord
from planning.time import date_from_timestamp_local

logger = get_logger(__name__)

PLANNING_SUFFIX = ".csv"


class PlanningRepository:
    def __init__(self, base_path: Path) -> None:
        self.base_path = base_path
        self._planning_files: Optional[list[PlanningFile]] = None

    @property
    def planning_files(self) -> list[PlanningFile]:
        if self._planning_files is None:
            self.__load_data()
        if self._planning_files is None:
            raise ValueError()
        return self._planning_files

    def __load_data(self) -> None:
        self._planning_files = []
        if not self.base_path.is_dir():
            logger.warning("Planning directory %s does not exist", self.base_path)
            return

        for file_path in self.base_path.rglob(f"*{PLANNING_SUFFIX}"):
            if not file_path.is_file():
                continue
            self._planning_files.append(self.__convert_path_to_planning_file(file_path))

        # Newest first, then by name
        self._planning_files.sort(key=lambda planning_file: planning_file.name)
        self._planning_files.sort(
            key=lambda planning_file: planning_file.published, reverse=True
        )
        logger.debug(
            "Found %d planning files in %s", len(self._planning_files), self.base_path
        )

    def __convert_path_to_planning_file(self, file_path: Path) -> PlanningFile:
        relative_path = file_path.relative_to(self.base_path)
        return PlanningFile(
            id=relative_path.with_suffix("").as_posix(),
            name=file_path.stem,
            path=file_path,
            published=date_from_timestamp_local(file_path.stat().st_mtime),
        )

    def list_planning_files(self) -> list[PlanningFile]:
        return list(self.planning_files)

    def get_planning_file(self, id_or_path: str) -> PlanningFile:
        """
        Resolve a planning by file path, by id or by file name.

        Raises:
            PlanningNotFoundError: nothing matches, or the file name is ambiguous
        """
        candidate_path = Path(id_or_path)
        if candidate_path.is_file():
            return PlanningFile(
                id=candidate_path.stem,
                name=candidate_path.stem,
                path=candidate_path,
                published=date_from_timestamp_local(candidate_path.stat().st_mtime),
            )

        for planning_file in self.planning_files:
            if planning_file.id == id_or_path:
                return planning_file

        matches = [
            planning_file
            for planning_file in self.planning_files
            if planning_file.name == id_or_path
        ]
        if len(matches) == 1:
            return matches[0]
        if len(matches) > 1:
            ids = ", ".join(planning_file.id for planning_file in matches)
            raise PlanningNotFoundError(
                f"Planning name '{id_or_path}' is ambiguous, use one of: {ids}"
            )

        raise PlanningNotFoundError(f"Planning '{id_or_path}' not found")

    def read_records(
        self,
        planning_file: PlanningFile,
        name_column: str = "Nom",
        status_column: str = "Statut",
        dates_column: str = "Dates",
    ) -> Iterator[RawRecord]:
        """
        Read the rows of a planning file in file order.

        Header cells are compared after stripping surrounding whitespace, so a
        "Statut " header matches the "Statut" column name. Blank rows are
        skipped; missing cells come back as None.

        Raises:
            PlanningSourceError: the file cannot be opened, is not UTF-8 text or
                is not valid CSV
        """
        try:
            with planning_file.path.open(
                encoding="utf-8-sig", newline=""
            ) as csv_file:
                reader = csv.DictReader(csv_file)
                if reader.fieldnames is None:
                    return
                reader.fieldnames = [field.strip() for field in reader.fieldnames]

                for row in reader:
                    if all(
                        value is None or str(value).strip() == ""
                        for value in row.values()
                    ):
                        continue
                    yield RawRecord(
                        name=row.get(name_column.strip()),
                        status_label=row.get(status_column.strip()),
                        date_expression=row.get(dates_column.strip()),
                    )
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise PlanningSourceError(
                f"Cannot read planning {planning_file.path}: {e}"
            ) from e

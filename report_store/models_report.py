# models_report.py
import re
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Iterable, List

# Даты в имени файла:
# - yyyy-mm-dd (Daily Meeting Report 2025-09-10.pdf)
# - dd-mm-yy   (BBP Report 10-09-25.pdf)
YMD_PATTERN = re.compile(r'\b(\d{4})-(\d{2})-(\d{2})\b', re.ASCII)
DMY_SHORT_PATTERN = re.compile(r'\b(\d{2})-(\d{2})-(\d{2})\b', re.ASCII)

EPOCH_DATE = date(1970, 1, 1)


def parse_report_date(file_name: str) -> str:
    """Извлекает дату отчета из имени файла в формате YYYY-MM-DD.

    Сначала ищется yyyy-mm-dd, затем dd-mm-yy (год + 2000). Срабатывает
    первый найденный шаблон, совпадение возвращается как есть, даже если
    такой календарной даты нет. Без совпадения возвращается пустая строка.
    """
    ymd = YMD_PATTERN.search(file_name)
    if ymd:
        y, m, d = ymd.groups()
        return f"{y}-{m}-{d}"

    dmy = DMY_SHORT_PATTERN.search(file_name)
    if not dmy:
        return ""
    d, m, yy = dmy.groups()
    return f"{2000 + int(yy)}-{m}-{d}"


def format_timestamp(dt: datetime) -> str:
    """ISO-8601 в UTC с миллисекундами и суффиксом Z."""
    dt = dt.astimezone(timezone.utc)
    return dt.strftime('%Y-%m-%dT%H:%M:%S.') + f"{dt.microsecond // 1000:03d}Z"


@dataclass
class Report:
    id: str
    date: str
    file_name: str
    file_path: str
    last_modified: datetime

    @classmethod
    def from_file(cls, file_name: str, file_path: str, last_modified: datetime) -> "Report":
        return cls(
            id=file_name,
            date=parse_report_date(file_name),
            file_name=file_name,
            file_path=file_path,
            last_modified=last_modified,
        )

    @property
    def sort_date(self) -> date:
        # Пустая или несуществующая дата (2025-13-45) сортируется как эпоха
        if not self.date:
            return EPOCH_DATE
        try:
            return date.fromisoformat(self.date)
        except ValueError:
            return EPOCH_DATE

    def to_dict(self):
        return {
            "id": self.id,
            "date": self.date,
            "fileName": self.file_name,
            "filePath": self.file_path,
            "lastModified": format_timestamp(self.last_modified),
        }


def report_sort_key(report: Report):
    return report.sort_date, report.last_modified


def sort_reports(reports: Iterable[Report]) -> List[Report]:
    # Сначала по дате из имени (новые первыми), затем по времени изменения
    return sorted(reports, key=report_sort_key, reverse=True)

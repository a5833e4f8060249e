"""
FileService - File store lookups

Existence checks for payment proofs and URI resolution for product media.
Uploading and thumbnailing are handled elsewhere; this service only reads.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List

from marketplace.catalog.domain.models import StoredFile
from utils.service_base import BaseService


@dataclass(frozen=True)
class FileInfo:
    file_id: str = ""
    file_uri: str = ""
    file_thumbnail_uri: str = ""


class FileService(BaseService):
    def get_files_info(self, file_ids: Iterable[int]) -> Dict[int, FileInfo]:
        """Map each stored file id to its URIs. Products without media (None) are skipped."""
        ids = {file_id for file_id in file_ids if file_id}
        if not ids:
            return {}
        return {
            stored.id: FileInfo(
                file_id=str(stored.id),
                file_uri=stored.file_uri,
                file_thumbnail_uri=stored.file_thumbnail_uri or "",
            )
            for stored in StoredFile.objects.filter(pk__in=ids)
        }

    def find_missing(self, file_ids: Iterable[int]) -> List[int]:
        """Return the ids of ``file_ids`` with no stored file, in input order."""
        file_ids = list(file_ids)
        existing = set(StoredFile.objects.filter(pk__in=set(file_ids)).values_list("id", flat=True))
        missing = []
        for file_id in file_ids:
            if file_id not in existing and file_id not in missing:
                missing.append(file_id)
        if missing:
            self.logger.info(f"File ids not found: {missing}")
        return missing

"""Application service for browsing the lawyer directory."""

from collections.abc import Sequence

from legal_platform.domain.entities import Lawyer


class LawyerDirectoryService:
    """Read-only search over a fixed catalog of listed lawyers."""

    def __init__(self, lawyers: Sequence[Lawyer]):
        self._lawyers = list(lawyers)

    def list_lawyers(
        self,
        *,
        search: str | None = None,
        specialty: str | None = None,
        location: str | None = None,
    ) -> list[Lawyer]:
        """Catalog entries matching every given filter, in catalog order.

        ``search`` is a case-insensitive substring of the name or specialty;
        ``specialty`` and ``location`` must match exactly.
        """
        needle = (search or "").lower()
        return [
            lawyer
            for lawyer in self._lawyers
            if (needle in lawyer.name.lower() or needle in lawyer.specialty.lower())
            and (not specialty or lawyer.specialty == specialty)
            and (not location or lawyer.location == location)
        ]

    def get_lawyer(self, lawyer_id: str) -> Lawyer | None:
        return next((lawyer for lawyer in self._lawyers if lawyer.id == lawyer_id), None)

    def specialties(self) -> list[str]:
        return sorted({lawyer.specialty for lawyer in self._lawyers})

    def locations(self) -> list[str]:
        return sorted({lawyer.location for lawyer in self._lawyers})

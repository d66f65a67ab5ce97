import hashlib
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


@dataclass(frozen=True)
class Version:
    """
    Semantic version of the hornet runner itself.

    Distinct from the suite version declared in a definition file, which
    labels the index a run produces.
    """

    major: int
    minor: int
    patch: int
    hash: str
    date: datetime

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def full_version(self) -> str:
        """Return version with short hash and build date."""
        return f"{self} (hash: {self.hash_short()}, date: {self.date_string()})"

    def semver(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def hash_short(self, length: int = 8) -> str:
        return self.hash[:length]

    def date_string(self, fmt: str = "%Y-%m-%d") -> str:
        return self.date.strftime(fmt)


def _compute_package_hash() -> str:
    """SHA256 over the package's Python sources, in path order."""
    package_dir = Path(__file__).resolve().parent.parent
    hasher = hashlib.sha256()
    for source in sorted(package_dir.rglob("*.py")):
        if "__pycache__" in source.parts:
            continue
        hasher.update(source.read_bytes())
    return hasher.hexdigest()


HORNET_VERSION = Version(
    major=0,
    minor=3,
    patch=0,
    hash=_compute_package_hash(),
    date=datetime(2026, 10, 19),
)

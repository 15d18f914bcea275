"""Load expressions from a text file or an archive."""
from pathlib import Path
import tarfile
import tempfile
from typing import Iterable, List
import zipfile

import py7zr
from pydantic import BaseModel, ConfigDict, Field, FilePath


ARCHIVE_FORMATS: tuple = (".zip", ".tar.xz", ".7z")


def _first_txt_member(names: Iterable[str], archive_format: str) -> str:
    """
    Pick the first .txt member of an archive listing.

    :param names: Member names in archive order
    :param str archive_format: Archive suffix, used in the error message

    :return: Name of the first .txt member
    :rtype: str
    :raises ValueError: If the archive holds no .txt member
    """
    for name in names:
        if name.endswith(".txt"):
            return name
    raise ValueError(f"📄❌ No .txt file found in {archive_format} archive")


class ExpressionSource(BaseModel):
    """
    Input file holding one arithmetic expression per line.

    Supported formats:
    - plain .txt file
    - .zip, .tar.xz or .7z archive containing at least one .txt file (the first one is used)
    """

    model_config = ConfigDict(frozen=True)

    path: FilePath = Field(..., description="Path to the expressions file or archive")

    @property
    def archive_format(self) -> str:
        """
        Archive suffix of the input path.

        :return: One of ARCHIVE_FORMATS
        :rtype: str
        :raises ValueError: If the suffix is not a supported archive format
        """
        if self.path.suffixes[-2:] == [".tar", ".xz"]:
            return ".tar.xz"
        if self.path.suffix in ARCHIVE_FORMATS:
            return self.path.suffix
        raise ValueError(f"📄❌ Unsupported archive format: {''.join(self.path.suffixes)}")

    def read_text(self) -> str:
        """
        Return the raw text of the expressions file.

        :return: File content
        :rtype: str
        :raises ValueError: If the archive format is unsupported or contains no .txt file
        """
        if self.path.suffix == ".txt":
            return self.path.read_text(encoding="utf-8")
        return self._extract_archive()

    def expressions(self) -> List[str]:
        """
        Return non-empty, stripped expression lines.

        :return: Expressions in file order
        :rtype: List[str]
        """
        return [line.strip() for line in self.read_text().splitlines() if line.strip()]

    def _extract_member(self, archive_format: str, destination: Path) -> str:
        """
        Extract the first .txt member into destination.

        :param str archive_format: One of ARCHIVE_FORMATS
        :param Path destination: Directory to extract into

        :return: Name of the extracted member, relative to destination
        :rtype: str
        """
        if archive_format == ".zip":
            with zipfile.ZipFile(self.path, "r") as zf:
                member = _first_txt_member(zf.namelist(), archive_format)
                zf.extract(member, path=destination)
        elif archive_format == ".tar.xz":
            with tarfile.open(self.path, "r:xz") as tf:
                member = _first_txt_member((m.name for m in tf.getmembers() if m.isfile()), archive_format)
                tf.extract(member, path=destination, filter="data")
        else:
            with py7zr.SevenZipFile(self.path, mode="r") as archive:
                member = _first_txt_member(archive.getnames(), archive_format)
                archive.extract(path=destination, targets=[member])
        return member

    def _extract_archive(self) -> str:
        """
        Extract the first .txt file of the archive and return its content.

        :return: Content of the extracted .txt file
        :rtype: str
        :raises ValueError: If no .txt file is found or format is unsupported
        """
        archive_format: str = self.archive_format
        # Extracted files live only as long as this directory
        with tempfile.TemporaryDirectory() as tmpdir:
            destination = Path(tmpdir)
            member: str = self._extract_member(archive_format, destination)
            return (destination / member).read_text(encoding="utf-8")

import zipfile


class ArchiveError(zipfile.BadZipFile):
    """Raised when zipfile cannot read a member (encryption, unsupported compression)."""

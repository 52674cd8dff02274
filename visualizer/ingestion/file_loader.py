from pathlib import Path

from visualizer.classification.media_types import guess_media_type
from visualizer.ingestion.exceptions import FileReadError
from visualizer.ingestion.models import Upload


class FileLoader:
    """Reads local files into uploads."""

    def load(self, path: Path) -> Upload:
        """Read file bytes from disk.

        Raises:
            FileNotFoundError: if the file does not exist.
            FileReadError: if the file exists but cannot be read.
        """
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Failed to read {path}: {exc}") from exc
        return Upload(data=data, media_type=guess_media_type(path.name), file_name=path.name)
